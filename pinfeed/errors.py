"""Exceptions raised while proxying a feed."""


class PinfeedError(Exception):
    """Base class for errors that end a proxied request with a 500."""


class UpstreamError(PinfeedError):
    """The upstream request could not be built or completed."""


class BodyDecodeError(PinfeedError):
    """The upstream body could not be decompressed."""


class FeedStructureError(PinfeedError):
    """The feed document is missing a structural marker."""
