"""Property-based tests for inbound path translation."""

import string

from hypothesis import given
from hypothesis import strategies as st

from pinfeed.urls import feed_url

ORIGIN = "https://www.pinterest.com"

segments = st.text(
    alphabet=string.ascii_letters + string.digits + "-_", min_size=1, max_size=30
)


class TestUrlsProperties:
    """Property-based tests for feed_url."""

    @given(segments, st.booleans())
    def test_user_path_property(self, username, suffix):
        """For any /<u> path, the upstream URL is the user's default feed."""
        path = f"/{username}" + (".rss" if suffix else "")

        assert feed_url(path, ORIGIN) == f"{ORIGIN}/{username}/feed.rss"

    @given(segments, segments, st.booleans())
    def test_board_path_property(self, username, board, suffix):
        """For any /<u>/<f> path, the upstream URL is that feed."""
        path = f"/{username}/{board}" + (".rss" if suffix else "")

        assert feed_url(path, ORIGIN) == f"{ORIGIN}/{username}/{board}.rss"

    @given(segments, segments, st.lists(segments, min_size=1, max_size=4))
    def test_extra_segments_property(self, username, board, rest):
        """Segments after the feed name never change the upstream URL."""
        path = "/".join(["", username, board, *rest])

        assert feed_url(path, ORIGIN) == f"{ORIGIN}/{username}/{board}.rss"
