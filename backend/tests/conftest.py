"""Shared test fixtures."""

from __future__ import annotations

import pytest

from artdxf.config import Settings


# Sample SVGs

EMPTY_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"/>'

RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <rect x="0" y="0" width="10" height="5"/>
</svg>'''

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <circle cx="3" cy="4" r="2"/>
</svg>'''

LINE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <line x1="0" y1="0" x2="1" y2="1"/>
</svg>'''

PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <path d="M 1,2 L 3,4 M 10,10 L 12,10 L 12,14"/>
</svg>'''

# Closed triangle: Z does not add the closing edge
CLOSED_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <path d="M0 0 L10 0 L10 10 Z"/>
</svg>'''

UNKNOWN_PARENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <ellipse cx="5" cy="5" rx="4" ry="2">
    <line x1="1" y1="2" x2="3" y2="4"/>
  </ellipse>
</svg>'''

# Barcode-art style export: groups, metadata, comments, a curve the converter skips
BARCODE_ART_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 120 40">
  <title>Barcode art</title>
  <!-- generated -->
  <g id="frame" stroke="#000" fill="none">
    <rect x="2" y="2" width="116" height="36"/>
    <circle cx="10" cy="20" r="3.5"/>
  </g>
  <g id="bars">
    <line x1="20" y1="6" x2="20" y2="34"/>
    <line x1="22.5" y1="6" x2="22.5" y2="34"/>
    <path d="M30 6 L30 34 M33 6 L33 34"/>
    <path d="M40 6 C45 10 50 10 55 6"/>
  </g>
  <text x="60" y="38">1234567890</text>
</svg>'''

MALFORMED_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><rect x="1"></svg>'


@pytest.fixture
def default_settings() -> Settings:
    return Settings()


@pytest.fixture
def rect_svg() -> str:
    return RECT_SVG


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def barcode_art_svg() -> str:
    return BARCODE_ART_SVG
