"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgrn.models.converter_config import ConverterConfig, OutputFormat


# Sample SVGs

RED_CIRCLE_SVG = '<svg width="24" height="24"><circle cx="12" cy="12" r="10" fill="#ff0000"/></svg>'

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

GRADIENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 100 50" version="1.1">
  <title> Sunset badge </title>
  <desc>A gradient badge</desc>
  <defs>
    <linearGradient id="sky" x1="0" y1="0" x2="0" y2="1">
      <stop offset="0" stop-color="#ff7e5f"/>
      <stop offset="1" stop-color="#feb47b" stop-opacity="0.8"/>
    </linearGradient>
    <clipPath id="clip">
      <rect width="100" height="50" rx="8"/>
    </clipPath>
  </defs>
  <g clip-path="url(#clip)" transform="translate(0 0)">
    <rect class="bg" width="100" height="50" fill="url(#sky)"/>
    <use xlink:href="#sky"/>
  </g>
</svg>'''

NESTED_GROUPS_SVG = '''<svg viewBox="0 0 24 24">
  <g>
    <g>
      <g/>
    </g>
  </g>
</svg>'''

WRAPPED_PATH_SVG = '''<svg viewBox="0 0 24 24">
  <g>
    <g>
      <path d="M0 0h24v24H0z" fill="#333"/>
    </g>
  </g>
</svg>'''

TEXT_SVG = '''<svg viewBox="0 0 100 20" width="100px" height="20px">
  <text x="0" y="15" font-size="12px" font-family="Arial" data-id="t1" aria-label="greeting">Hello</text>
</svg>'''

STYLED_SVG = '''<svg viewBox="0 0 10 10">
  <rect width="10" height="10" style="fill: red; stroke-width: 2; background: url(http://x/y.png)"/>
</svg>'''

UNSUPPORTED_SVG = '''<svg viewBox="0 0 10 10">
  <filter id="blur"><feGaussianBlur stdDeviation="2"/></filter>
  <rect width="10" height="10" filter="url(#blur)"/>
</svg>'''


@pytest.fixture
def native_config() -> ConverterConfig:
    return ConverterConfig()


@pytest.fixture
def web_config() -> ConverterConfig:
    return ConverterConfig(output_format=OutputFormat.REACT)


@pytest.fixture
def icon_config() -> ConverterConfig:
    return ConverterConfig.model_validate({
        "icon": {"enabled": True, "replace_color_with_prop": True, "default_size": 32},
    })
