"""WSGI entry point, e.g. ``gunicorn pinfeed.wsgi:app``."""

from .app import build_app

app = build_app()
