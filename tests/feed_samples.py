"""Pinterest-shaped feed documents shared by the tests."""

ORIGIN = "https://www.pinterest.com"

FEED_HEAD = (
    b'<?xml version="1.0" encoding="UTF-8"?>\n'
    b'<rss version="2.0"><channel><title>Alice</title>'
    b"<link>https://www.pinterest.com/alice/</link>"
    b"<description>Pins by Alice</description><language>en-us</language>"
    b"<lastBuildDate>Sat, 17 Oct 2026 10:00:00 GMT</lastBuildDate>"
)
FEED_TAIL = b"</channel></rss>\n"


def thumbnail(size: str = "236x", path: str = "ab/cd/ef/abcdef0123.jpg") -> str:
    return f"https://i.pinimg.com/{size}/{path}"


def channel_item(short_title: str, full_title: str, pin: int = 1) -> bytes:
    """An item as found in a user's channel feed."""
    return (
        f"<item><title>{short_title}</title>"
        f"<link>https://www.pinterest.com/pin/{pin}/</link>"
        f"<description>&lt;p&gt;&lt;a href=\"/pin/{pin}/\"&gt;"
        f"&lt;img src=\"{thumbnail()}\"&gt;&lt;/a&gt;&lt;/p&gt;"
        f"&lt;p&gt;{full_title}&lt;/p&gt;</description>"
        f"<pubDate>Fri, 16 Oct 2026 09:00:00 GMT</pubDate>"
        f"<guid>https://www.pinterest.com/pin/{pin}/</guid></item>"
    ).encode()


def board_item(short_title: str, full_title: str, pin: int = 1) -> bytes:
    """An item as found in a board feed."""
    return (
        f"<item><title>{short_title}</title>"
        f"<link>https://www.pinterest.com/pin/{pin}/</link>"
        f"<description>&lt;a href=\"/pin/{pin}/\"&gt;"
        f"&lt;img src=\"{thumbnail()}\"&gt;&lt;/a&gt;{full_title}</description>"
        f"<guid>https://www.pinterest.com/pin/{pin}/</guid></item>"
    ).encode()


def plain_item(short_title: str, pin: int = 1) -> bytes:
    """An item whose description carries no full title."""
    return (
        f"<item><title>{short_title}</title>"
        f"<link>https://www.pinterest.com/pin/{pin}/</link>"
        f"<description>No markup here</description></item>"
    ).encode()


def make_feed(*items: bytes) -> bytes:
    return FEED_HEAD + b"".join(items) + FEED_TAIL
