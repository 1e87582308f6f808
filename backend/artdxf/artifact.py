"""Build the DXF companion file for an uploaded barcode-art SVG."""

from __future__ import annotations

import logging

from artdxf.config import Settings
from artdxf.converter.convert import convert_svg
from artdxf.models.artifact import DxfArtifact
from artdxf.storage.keys import derive_dxf_url, extract_object_key, is_cdn_url

logger = logging.getLogger(__name__)


def build_dxf_artifact(
    svg_text: str,
    svg_url: str,
    dxf_url: str | None = None,
    settings: Settings | None = None,
) -> DxfArtifact:
    """Convert ``svg_text`` and work out where the DXF belongs.

    The target is ``dxf_url`` when given, else the SVG URL with ``/art.svg``
    swapped for ``/art.dxf``. Raises ``ConversionError`` or
    ``InvalidObjectUrlError``; uploading is left to the caller.
    """
    target_url = derive_dxf_url(svg_url, dxf_url)
    key = extract_object_key(target_url)
    result = convert_svg(svg_text, settings=settings)

    artifact = DxfArtifact(
        url=target_url,
        key=key,
        content=result.dxf.encode("utf-8"),
        entity_count=len(result.primitives),
        needs_cache_purge=is_cdn_url(target_url),
    )
    logger.info("DXF artifact for %s: key=%s, %d bytes", svg_url, key, artifact.size)
    return artifact
