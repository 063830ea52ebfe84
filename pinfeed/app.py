"""HTTP entry point of the Pinterest feed proxy."""

from flask import Flask, Response, current_app, redirect, request

from .config import Config, ProxyConfig
from .errors import FeedStructureError, PinfeedError
from .fetch import FeedFetcher
from .headers import copy_headers, forward_headers
from .logging_config import create_request_logger, setup_structured_logging
from .rewrite import rewrite_feed
from .urls import feed_url

METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(config: ProxyConfig | None = None) -> Flask:
    """Create the proxy application.

    Args:
        config: Proxy configuration, read from the environment if omitted

    Returns:
        Configured Flask application
    """
    if config is None:
        config = Config().get_proxy_config()

    app = Flask(__name__)
    app.config["PINFEED"] = config

    @app.route("/", methods=METHODS)
    def home():
        return redirect(current_app.config["PINFEED"].redirect_url, code=301)

    @app.route("/<path:path>", methods=METHODS)
    def proxy(path):
        return proxy_feed(current_app.config["PINFEED"])

    return app


def build_app() -> Flask:
    """Create the proxy application with logging set up from the environment.

    This is the entry point for WSGI servers (see ``pinfeed.wsgi``).
    """
    config = Config()
    setup_structured_logging(config.get_server_config().log_level)
    return create_app(config.get_proxy_config())


def _response(body: bytes = b"", status: int = 200, headers=None) -> Response:
    """Build a response carrying only the given headers.

    Flask adds a default text/html Content-Type, which the upstream never
    sent, so it is removed before the upstream headers are applied.
    """
    response = Response(body, status=status)
    response.headers.pop("Content-Type", None)
    for name, value in (headers or {}).items():
        response.headers[name] = value
    return response


def proxy_feed(config: ProxyConfig) -> Response:
    """Proxy the current request to the upstream feed and rewrite it.

    Errors end the request with an empty 500, their details go to the log.
    """
    logger = create_request_logger("handler")
    url = feed_url(request.path, config.origin)
    logger.info(
        "Proxying feed request", method=request.method, path=request.path, feed_url=url
    )

    try:
        headers = forward_headers(request.headers)
        with FeedFetcher(config.timeout, logger.request_id) as fetcher:
            upstream = fetcher.fetch(request.method, url, headers)
    except PinfeedError as e:
        logger.error(f"Upstream request failed: {e}", feed_url=url, error=str(e))
        return _response(status=500)

    if upstream.not_modified:
        return _response(status=304)

    # Only a complete 200 body is a feed document
    body = upstream.body
    if request.method != "HEAD" and upstream.status_code == 200:
        try:
            body = rewrite_feed(body, config.title_fallback)
        except FeedStructureError as e:
            logger.error(f"Malformed upstream feed: {e}", feed_url=url, error=str(e))
            return _response(status=500)

    response = _response(body, upstream.status_code, copy_headers(upstream.headers))

    logger.info(
        "Feed request completed",
        feed_url=url,
        status_code=upstream.status_code,
        content_length=len(body),
    )
    return response


def main() -> None:
    """Run the proxy with the built-in server."""
    server = Config().get_server_config()
    app = build_app()
    app.run(host=server.host, port=server.port, threaded=True)


if __name__ == "__main__":
    main()
