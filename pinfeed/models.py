"""Data models for the Pinterest feed proxy."""

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_FEED_NAME = "feed"


@dataclass(frozen=True)
class FeedAddress:
    """Username and feed name extracted from an inbound path."""

    username: str = ""
    feed_name: str = ""

    @property
    def feed_or_default(self) -> str:
        return self.feed_name or DEFAULT_FEED_NAME


class TitleFallback(Enum):
    """What to do with an item whose full title cannot be found."""

    KEEP = "keep"  # leave the truncated title as it is
    BLANK = "blank"  # empty the title element


@dataclass
class UpstreamResponse:
    """Represents a response received from the upstream feed server."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def not_modified(self) -> bool:
        return self.status_code == 304
