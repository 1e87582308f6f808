"""Pure helpers for locating barcode-art files in object storage."""

from artdxf.storage.keys import derive_dxf_url, extract_object_key, is_cdn_url

__all__ = ["derive_dxf_url", "extract_object_key", "is_cdn_url"]
