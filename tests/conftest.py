from xml.etree import ElementTree

import pytest

from badgeland import FontMetrics, GlyphWidthCache, Icon

GIT_SYMBOL = (
    '<symbol id="git" viewBox="0 0 448 512">'
    '<path d="M439.6 236.1L244 40.5a28.87 28.87 0 0 0-40.8 0l-40.7 40.7 51.5 51.5z"/>'
    "</symbol>"
)


@pytest.fixture
def metrics():
    """A provider with its own empty cache, so tests never share glyph widths."""
    return FontMetrics(cache=GlyphWidthCache())


@pytest.fixture
def icon():
    return Icon(name="git", symbol=GIT_SYMBOL)


@pytest.fixture
def parse_svg():
    def _parse(svg: str) -> ElementTree.Element:
        return ElementTree.fromstring(svg)

    return _parse
