"""Feed body rewriting: larger thumbnails and full item titles.

The feed is handled as text. Regions are located with literal markers so
that everything outside the rewritten title elements is kept byte for
byte.
"""

import re

from .errors import FeedStructureError
from .models import TitleFallback

THUMBNAIL_SIZE = b"1200x"

THUMBNAIL_PATTERN = re.compile(
    rb"\b(https?://[0-9a-z-]+\.pinimg\.com/)(\d+x)(/[/0-9a-f]+\.jpg)\b"
)

ITEM_OPEN = b"<item>"
ITEM_CLOSE = b"</item>"
LAST_BUILD_DATE_CLOSE = b"</lastBuildDate>"
CHANNEL_CLOSE = b"</channel>"
TAIL_PATTERN = re.compile(rb"</channel>\s*</rss>")
TITLE_PATTERN = re.compile(rb"(<title>)(.*?)(</title>)", re.DOTALL)

# Full titles live in the escaped HTML of the description
FULL_TITLE_CHANNEL = re.compile(
    rb"/a&gt;&lt;/p&gt;&lt;p&gt;(.*?)&lt;/p&gt;", re.DOTALL
)
FULL_TITLE_BOARD = re.compile(rb"&gt;&lt;/a&gt;(.*?)</description>", re.DOTALL)


def rewrite_thumbnails(body: bytes) -> bytes:
    """Upgrade every pinimg.com thumbnail URL to the 1200x rendition."""
    return THUMBNAIL_PATTERN.sub(rb"\g<1>" + THUMBNAIL_SIZE + rb"\g<3>", body)


def extract_full_title(item: bytes) -> bytes | None:
    """Find the full title of an item in its description.

    Channel feeds wrap the title in its own paragraph after the pin link;
    board feeds put it right after the link, up to the end of the
    description.

    Returns:
        The raw (still escaped) title, or None if the item has none
    """
    for pattern in (FULL_TITLE_CHANNEL, FULL_TITLE_BOARD):
        match = pattern.search(item)
        if match:
            return match.group(1)
    return None


def _find_items(region: bytes) -> list[bytes]:
    """Collect every <item>...</item> fragment of a region, in order."""
    items = []
    start = region.find(ITEM_OPEN)
    while start != -1:
        end = region.find(ITEM_CLOSE, start + len(ITEM_OPEN))
        if end == -1:
            break
        end += len(ITEM_CLOSE)
        items.append(region[start:end])
        start = region.find(ITEM_OPEN, end)
    return items


def split_feed(body: bytes) -> tuple[bytes, list[bytes], bytes]:
    """Split a feed document into its head, item fragments and tail.

    The head is everything before the first item. The tail starts at the
    last closing </channel></rss> and runs to the end of the document.
    Markers are located with plain searches so that a truncated feed is
    rejected in linear time.

    Raises:
        FeedStructureError: If the item or channel markers are missing
    """
    head_end = body.find(ITEM_OPEN)
    if head_end == -1:
        raise FeedStructureError("Feed has no <item>")

    tail = None
    for tail in TAIL_PATTERN.finditer(body, head_end + len(ITEM_OPEN)):
        pass
    if tail is None:
        raise FeedStructureError("Feed has no closing </channel></rss>")

    region_start = body.find(LAST_BUILD_DATE_CLOSE)
    region_end = -1
    if region_start != -1:
        region_start += len(LAST_BUILD_DATE_CLOSE)
        region_end = body.find(CHANNEL_CLOSE, region_start)
    if region_end == -1:
        raise FeedStructureError("Feed has no </lastBuildDate> ... </channel> region")

    items = _find_items(body[region_start:region_end])
    return body[:head_end], items, body[tail.start() :]


def rewrite_item_title(
    item: bytes, fallback: TitleFallback = TitleFallback.KEEP
) -> bytes:
    """Replace the title of one item fragment with its full title.

    Only the first title element is replaced. Items without a title element
    come back unchanged.
    """
    full_title = extract_full_title(item)
    if full_title is None:
        if fallback is TitleFallback.KEEP:
            return item
        full_title = b""

    return TITLE_PATTERN.sub(
        lambda title: title.group(1) + full_title + title.group(3), item, count=1
    )


def reconstruct_titles(
    body: bytes, fallback: TitleFallback = TitleFallback.KEEP
) -> bytes:
    """Rewrite every item title of a feed document.

    Args:
        body: The feed document
        fallback: Policy for items without a recoverable full title

    Returns:
        The head, the rewritten items in their original order, and the tail

    Raises:
        FeedStructureError: If the document lacks the expected markers
    """
    head, items, tail = split_feed(body)
    rewritten = b"".join(rewrite_item_title(item, fallback) for item in items)
    return head + rewritten + tail


def rewrite_feed(body: bytes, fallback: TitleFallback = TitleFallback.KEEP) -> bytes:
    """Apply the thumbnail and title rewrites to a feed document."""
    return reconstruct_titles(rewrite_thumbnails(body), fallback)
