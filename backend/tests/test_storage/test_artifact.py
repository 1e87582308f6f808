"""Tests for DXF artifact generation."""

import pytest

from artdxf.artifact import build_dxf_artifact
from artdxf.errors import ConversionError, InvalidObjectUrlError
from tests.conftest import BARCODE_ART_SVG, MALFORMED_SVG

IMGIX_SVG = "https://pirani-customizer.imgix.net/rendered/0123456789/art.svg"
WASABI_SVG = "https://s3.us-east-1.wasabisys.com/barcode-art/rendered/0123456789/art.svg"


def test_artifact_from_imgix_svg(default_settings):
    artifact = build_dxf_artifact(BARCODE_ART_SVG, IMGIX_SVG, settings=default_settings)
    assert artifact.url == "https://pirani-customizer.imgix.net/rendered/0123456789/art.dxf"
    assert artifact.key == "rendered/0123456789/art.dxf"
    assert artifact.content_type == "application/dxf"
    assert artifact.content.startswith(b"0\nSECTION\n2\nHEADER")
    assert artifact.content.endswith(b"0\nEOF")
    assert artifact.entity_count == 9
    assert artifact.needs_cache_purge
    assert artifact.size == len(artifact.content)


def test_artifact_from_wasabi_svg(default_settings):
    artifact = build_dxf_artifact(BARCODE_ART_SVG, WASABI_SVG, settings=default_settings)
    assert artifact.key == "rendered/0123456789/art.dxf"
    assert not artifact.needs_cache_purge


def test_explicit_dxf_url(default_settings):
    artifact = build_dxf_artifact(
        BARCODE_ART_SVG,
        IMGIX_SVG,
        dxf_url="https://s3.us-east-1.wasabisys.com/barcode-art/cut/0123456789.dxf",
        settings=default_settings,
    )
    assert artifact.key == "cut/0123456789.dxf"


def test_conversion_failure_propagates(default_settings):
    with pytest.raises(ConversionError):
        build_dxf_artifact(MALFORMED_SVG, IMGIX_SVG, settings=default_settings)


def test_bad_target_url(default_settings):
    with pytest.raises(InvalidObjectUrlError):
        build_dxf_artifact(BARCODE_ART_SVG, "art.svg", settings=default_settings)
