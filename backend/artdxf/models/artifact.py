"""DXF artifact generated from an uploaded SVG."""

from __future__ import annotations

from pydantic import BaseModel

from artdxf.converter.convert import DXF_CONTENT_TYPE


class DxfArtifact(BaseModel):
    url: str
    key: str
    content: bytes
    content_type: str = DXF_CONTENT_TYPE
    entity_count: int = 0
    needs_cache_purge: bool = False

    @property
    def size(self) -> int:
        return len(self.content)
