"""ArtBrowser - page through a remote artwork collection and select across pages."""

__version__ = "1.0.0"
