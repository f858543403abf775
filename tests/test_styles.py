import pytest

from badgeland import (
    DEFAULT_BLACK,
    DEFAULT_GRAY,
    DEFAULT_GRAY_DARK,
    Badge,
    BadgeSpec,
    DataContent,
    Size,
    Style,
    StyleError,
    TextContent,
    compute_layout,
)

NS = {"svg": "http://www.w3.org/2000/svg"}


@pytest.mark.parametrize(
    "text, expected",
    [
        ("classic", Style.CLASSIC), ("C", Style.CLASSIC),
        ("Flat", Style.FLAT), ("f", Style.FLAT),
        ("SOCIAL", Style.SOCIAL), ("z", Style.SOCIAL),
    ],
)
def test_style_from_str(text, expected):
    assert Style.from_str(text) is expected


def test_style_from_str_rejects_unknown():
    with pytest.raises(StyleError, match="Invalid Style"):
        Style.from_str("plastic")
    with pytest.raises(ValueError):
        Style.from_str("s")


@pytest.mark.parametrize(
    "style, size, radius",
    [
        (Style.CLASSIC, Size.SMALL, 3), (Style.CLASSIC, Size.MEDIUM, 6), (Style.CLASSIC, Size.LARGE, 9),
        (Style.FLAT, Size.SMALL, 0), (Style.FLAT, Size.LARGE, 0),
        (Style.SOCIAL, Size.SMALL, 3), (Style.SOCIAL, Size.LARGE, 3),
    ],
)
def test_corner_radius(style, size, radius):
    assert style.corner_radius(size) == radius


@pytest.mark.parametrize("size, rx", [(Size.SMALL, "3"), (Size.MEDIUM, "6"), (Size.LARGE, "9")])
def test_classic_mask_is_rounded(metrics, parse_svg, size, rx):
    root = parse_svg(Badge().subject("classic").size(size).text("badge").render(metrics))
    assert root.find("svg:defs/svg:mask[@id='bg-mask']/svg:rect", NS).get("rx") == rx
    assert root.find("svg:g[@id='bg']", NS).get("mask") == "url(#bg-mask)"


def test_classic_gradient_is_painted_last(metrics, parse_svg):
    root = parse_svg(Badge().subject("classic").text("badge").render(metrics))
    assert root.find("svg:defs/svg:linearGradient[@id='a']", NS) is not None
    assert root.findall("svg:g[@id='bg']/svg:rect", NS)[-1].get("fill") == "url(#a)"


def test_flat_has_no_gradient_or_mask(metrics, parse_svg):
    root = parse_svg(Badge().subject("flat").style(Style.FLAT).text("badge").render(metrics))
    assert root.find(".//svg:linearGradient", NS) is None
    assert root.find(".//svg:mask", NS) is None
    assert root.find("svg:defs/svg:filter[@id='shadow']", NS) is not None
    background = root.findall("svg:g[@id='bg']/svg:rect", NS)
    assert background[0].get("fill") == DEFAULT_GRAY
    assert [rect.get("id") for rect in background[1:]] == ["subject", "content"]


def test_flat_chart_has_no_stroke_margin(metrics):
    content = DataContent((1.0, 2.0, 3.0))
    classic = compute_layout(BadgeSpec(style=Style.CLASSIC), content, metrics)
    flat = compute_layout(BadgeSpec(style=Style.FLAT), content, metrics)
    assert classic.content.box_width == 105
    assert flat.content.box_width == 100


@pytest.mark.parametrize(
    "badge, flood_color",
    [
        (Badge().subject("subject only"), DEFAULT_GRAY_DARK),
        (Badge().subject("with").text("content"), DEFAULT_BLACK),
    ],
)
def test_shadow_flood_color(metrics, parse_svg, badge, flood_color):
    root = parse_svg(badge.render(metrics))
    shadow = root.find("svg:defs/svg:filter[@id='shadow']/svg:feDropShadow", NS)
    assert shadow.get("flood-color") == flood_color
    assert shadow.get("flood-opacity") == "0.4"


def test_social_reserves_notch_width(metrics, parse_svg):
    spec = BadgeSpec(subject="stars", style=Style.SOCIAL)
    layout = compute_layout(spec, TextContent("1.2k"), metrics)
    assert layout.width == layout.subject.box_width + layout.content.box_width + 7
    assert layout.content_x == layout.subject.box_width + 7
    root = parse_svg(Badge(spec).text("1.2k").render(metrics))
    assert root.get("width") == str(layout.width)


def test_social_background(metrics, parse_svg):
    root = parse_svg(Badge().subject("stars").style(Style.SOCIAL).text("1.2k").render(metrics))
    assert ".sb" in root.find("svg:defs/svg:style", NS).text
    subject, content = root.findall("svg:g[@id='bg']/svg:rect", NS)
    assert subject.get("class") == "sb"
    assert content.get("class") == "cb"
    assert subject.get("x") == "0.5"
    assert subject.get("rx") == "3"
    assert root.find("svg:g[@id='bg']/svg:path[@id='notch']", NS) is not None
    assert root.find(".//svg:filter", NS) is None
    assert root.find(".//svg:linearGradient", NS) is None


@pytest.mark.parametrize(
    "badge",
    [
        Badge().subject("only subject").style(Style.SOCIAL),
        Badge().style(Style.SOCIAL).text("only text"),
    ],
)
def test_social_notch_needs_both_segments(metrics, parse_svg, badge):
    root = parse_svg(badge.render(metrics))
    assert root.find(".//svg:path[@id='notch']", NS) is None


def test_social_text_colors(metrics, parse_svg):
    root = parse_svg(Badge().subject("stars").color("#e05d44").style(Style.SOCIAL).text("1.2k").render(metrics))
    assert root.find("svg:g[@id='text']", NS).get("fill") == "#333"
    subject, content = root.findall("svg:g[@id='text']/svg:text", NS)
    assert subject.get("fill") is None
    assert content.get("fill") == "#e05d44"
    assert content.get("filter") is None


def test_social_icon_color(metrics, parse_svg, icon):
    plain = parse_svg(Badge().icon(icon).style(Style.SOCIAL).text("x").render(metrics))
    assert plain.find("svg:g[@id='text']/svg:use", NS).get("fill") == "#555"
    colored = parse_svg(Badge().icon(icon).icon_color("#f00").style(Style.SOCIAL).text("x").render(metrics))
    assert colored.find("svg:g[@id='text']/svg:use", NS).get("fill") == "#f00"


@pytest.mark.parametrize("style", list(Style))
def test_default_icon_color(metrics, parse_svg, icon, style):
    root = parse_svg(Badge().icon(icon).style(style).text("x").render(metrics))
    assert root.find("svg:g[@id='text']/svg:use", NS).get("fill") == style.default_icon_color


@pytest.mark.parametrize("style", list(Style))
def test_every_style_is_accessible(metrics, parse_svg, style):
    root = parse_svg(Badge().subject("build").style(style).text("passing").render(metrics))
    assert root.get("role") == "img"
    assert root.get("aria-label") == "build: passing"
    assert root.find("svg:title", NS).text == "build: passing"


@pytest.mark.parametrize("style", list(Style))
def test_every_style_renders_data(metrics, parse_svg, style):
    root = parse_svg(Badge().subject("trend").style(style).data([3, 1, 4, 1, 5]).render(metrics))
    assert len(root.findall("svg:g[@id='text']/svg:path", NS)) == 2
    assert root.find("svg:g[@id='bg']/svg:rect[@id='content']", NS) is not None


def test_style_str():
    assert str(Style.SOCIAL) == "Social"


def test_social_without_subject_trails_the_notch_gap(metrics, parse_svg):
    spec = BadgeSpec(style=Style.SOCIAL)
    layout = compute_layout(spec, TextContent("1.2k"), metrics)
    assert layout.content_x == 0
    assert layout.width == layout.content.box_width + 7
    root = parse_svg(Badge(spec).text("1.2k").render(metrics))
    assert root.find("svg:g[@id='bg']/svg:rect[@id='content']", NS).get("x") == "0.5"
