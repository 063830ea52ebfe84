"""Header handling between the client, the proxy and the upstream server."""

from collections.abc import Iterable, Mapping

from .config import FORCED_ACCEPT_ENCODING, RESPONSE_HEADER_ALLOW_LIST

# Describe the inbound connection or body, or ask for a partial feed that
# cannot be rewritten
EXCLUDED_REQUEST_HEADERS = frozenset(
    {"host", "content-length", "transfer-encoding", "trailer", "range", "if-range"}
)

# requests takes one value per name, so repeated headers are folded
COOKIE_SEPARATOR = "; "
LIST_SEPARATOR = ", "


def _pairs(headers: Mapping[str, str] | Iterable[tuple[str, str]]):
    if hasattr(headers, "items"):
        return headers.items()
    return headers


def forward_headers(
    inbound: Mapping[str, str] | Iterable[tuple[str, str]],
) -> dict[str, str]:
    """Build the upstream request headers from the client's headers.

    Every header is passed along and Accept-Encoding is replaced so that
    the upstream body is compressed. Range requests are dropped.
    Repeated names are folded into one value, joined with "; " for Cookie
    and ", " for everything else.

    Args:
        inbound: Client request headers, as a mapping or as name/value pairs

    Returns:
        Headers for the upstream request
    """
    forwarded: dict[str, str] = {}
    names: dict[str, str] = {}

    for name, value in _pairs(inbound):
        key = name.lower()
        if key in EXCLUDED_REQUEST_HEADERS or key == "accept-encoding":
            continue
        if key in names:
            original = names[key]
            separator = COOKIE_SEPARATOR if key == "cookie" else LIST_SEPARATOR
            forwarded[original] = f"{forwarded[original]}{separator}{value}"
        else:
            names[key] = name
            forwarded[name] = value

    forwarded["Accept-Encoding"] = FORCED_ACCEPT_ENCODING
    return forwarded


def copy_headers(
    response_headers: Mapping[str, str],
    allow_list: Iterable[str] = RESPONSE_HEADER_ALLOW_LIST,
) -> dict[str, str]:
    """Select the allow-listed upstream response headers.

    Args:
        response_headers: Upstream response headers
        allow_list: Header names to keep, in output order

    Returns:
        Headers with a non-empty upstream value, keyed by allow-list name
    """
    lookup = {name.lower(): value for name, value in response_headers.items()}

    copied = {}
    for name in allow_list:
        value = lookup.get(name.lower())
        if value:
            copied[name] = value
    return copied
