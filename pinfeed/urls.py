"""Translation of inbound proxy paths into upstream feed URLs."""

from .config import DEFAULT_ORIGIN
from .models import FeedAddress

FEED_SUFFIX = ".rss"


def user_and_feed(path: str) -> FeedAddress:
    """Extract the username and feed name from an inbound path.

    ``/alice`` gives ``("alice", "")`` and ``/alice/boards.rss`` gives
    ``("alice", "boards")``. Segments past the feed name are ignored.
    """
    path = path.removesuffix(FEED_SUFFIX)
    parts = path.split("/", 3)

    username = parts[1] if len(parts) > 1 else ""
    feed_name = parts[2] if len(parts) > 2 else ""
    return FeedAddress(username=username, feed_name=feed_name)


def feed_url(path: str, origin: str = DEFAULT_ORIGIN) -> str:
    """Build the upstream feed URL for an inbound path."""
    address = user_and_feed(path)
    return f"{origin}/{address.username}/{address.feed_or_default}{FEED_SUFFIX}"
