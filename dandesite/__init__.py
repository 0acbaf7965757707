"""Markdown blog generator, HTML page rendering and a small HTTP site server."""

__version__ = "0.1.3"