"""Upstream feed fetching for the Pinterest feed proxy."""

import requests
from requests.structures import CaseInsensitiveDict

from . import __version__
from .errors import BodyDecodeError, UpstreamError
from .logging_config import create_request_logger
from .models import UpstreamResponse


class FeedFetcher:
    """Issues the upstream request for a single proxied feed."""

    def __init__(self, timeout: float = 30.0, request_id: str | None = None):
        """Initialize FeedFetcher with configuration.

        Args:
            timeout: HTTP request timeout in seconds
            request_id: Request ID for logging context
        """
        self.timeout = timeout
        self.logger = create_request_logger("fetcher", request_id)
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": f"pinfeed/{__version__}"})

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        self.session.close()

    def fetch(self, method: str, url: str, headers: dict[str, str]) -> UpstreamResponse:
        """Fetch a feed from the upstream server.

        A 304 response is returned without reading its body. Otherwise the
        body is read in full, decompressed by requests according to the
        upstream Content-Encoding.

        Args:
            method: HTTP method of the inbound request
            url: Upstream feed URL
            headers: Headers to send upstream

        Returns:
            UpstreamResponse with status, headers and decoded body

        Raises:
            UpstreamError: If the request cannot be built or completed
            BodyDecodeError: If the body cannot be decompressed
        """
        self.logger.info("Fetching upstream feed", method=method, feed_url=url)

        try:
            with self.session.request(
                method, url, headers=headers, timeout=self.timeout, stream=True
            ) as response:
                if response.status_code == 304:
                    self.logger.info(
                        "Upstream feed not modified", feed_url=url, status_code=304
                    )
                    return UpstreamResponse(
                        status_code=304, headers=CaseInsensitiveDict(response.headers)
                    )

                body = response.content
                self.logger.info(
                    "Upstream feed downloaded",
                    feed_url=url,
                    status_code=response.status_code,
                    content_length=len(body),
                )
                return UpstreamResponse(
                    status_code=response.status_code,
                    headers=CaseInsensitiveDict(response.headers),
                    body=body,
                )
        except requests.exceptions.ContentDecodingError as e:
            self.logger.error(
                f"Failed to decode upstream body: {e}", feed_url=url, error=str(e)
            )
            raise BodyDecodeError(f"Failed to decode body of {url}") from e
        except requests.RequestException as e:
            self.logger.error(
                f"Failed to fetch upstream feed: {e}", feed_url=url, error=str(e)
            )
            raise UpstreamError(f"Failed to fetch {url}") from e
