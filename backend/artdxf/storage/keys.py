"""Object-key derivation for barcode-art files on Wasabi and imgix URLs."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from artdxf.errors import InvalidObjectUrlError

_STORAGE_HOST_MARKER = "wasabisys.com"
_CDN_HOST_MARKER = "imgix.net"
_ART_SVG_SUFFIX_RE = re.compile(r"/art\.svg$", re.IGNORECASE)


def extract_object_key(url: str) -> str:
    """Map a storage or CDN URL to the object key inside the bucket.

    Path-style storage URLs carry the bucket as their first path segment,
    which is dropped. CDN URLs map their whole path onto the bucket.
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise InvalidObjectUrlError(url)

    segments = [s for s in parts.path.split("/") if s]
    if _STORAGE_HOST_MARKER in (parts.hostname or ""):
        if len(segments) < 2:
            raise InvalidObjectUrlError(url, f"Invalid Wasabi URL format: {url}")
        return "/".join(segments[1:])
    return "/".join(segments)


def derive_dxf_url(svg_url: str, dxf_url: str | None = None) -> str:
    """DXF location for an SVG: explicit ``dxf_url`` or ``.../art.svg`` → ``.../art.dxf``."""
    if dxf_url:
        return dxf_url
    return _ART_SVG_SUFFIX_RE.sub("/art.dxf", svg_url)


def is_cdn_url(url: str) -> bool:
    """True when the URL is served through imgix and its cache needs purging."""
    return _CDN_HOST_MARKER in url
