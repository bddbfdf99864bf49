"""Shared test fixtures."""

from __future__ import annotations

import pytest

from clipnorm.engine.pipeline import Pipeline, create_pipeline


# Sample SVGs

RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
  <rect x="10" y="10" width="100" height="50" fill="#4ECDC4"/>
</svg>'''

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

MIXED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 259">
  <title>Mixed shapes</title>
  <defs>
    <rect id="hidden" x="0" y="0" width="5" height="5"/>
  </defs>
  <g fill="#45B7D1">
    <polygon points="128,10 240,80 240,200 128,249 16,200 16,80"/>
    <ellipse cx="128" cy="130" rx="60" ry="30"/>
  </g>
  <line x1="0" y1="0" x2="10" y2="10"/>
  <polyline points="10 10, 20 30, 30 10"/>
</svg>'''

EXISTING_CLIP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <clipPath id="shape" clipPathUnits="userSpaceOnUse">
    <path d="M10 10 H110 V60 H10 Z"/>
    <circle cx="50" cy="50" r="25"/>
  </clipPath>
  <rect x="0" y="0" width="100" height="100" clip-path="url(#shape)"/>
</svg>'''

NO_SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <text x="2" y="12">no geometry here</text>
</svg>'''


@pytest.fixture
def pipeline() -> Pipeline:
    return create_pipeline()


@pytest.fixture
def rect_svg() -> str:
    return RECT_SVG


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def mixed_svg() -> str:
    return MIXED_SVG
