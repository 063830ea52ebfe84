"""Pinterest RSS proxy with full titles and large thumbnails."""

__version__ = "1.0.0"
