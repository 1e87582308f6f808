"""Exception types raised by artdxf."""

from __future__ import annotations


class ArtDxfError(Exception):
    """Base class for all artdxf errors."""


class ConversionError(ArtDxfError):
    """SVG → DXF conversion failed. ``reason`` holds the underlying cause."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to convert SVG to DXF: {reason}")


class InvalidObjectUrlError(ArtDxfError, ValueError):
    """A storage or CDN URL could not be mapped to an object key."""

    def __init__(self, url: str, message: str | None = None) -> None:
        self.url = url
        super().__init__(message or f"Invalid URL format: {url}")
