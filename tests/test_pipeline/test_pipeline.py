"""End-to-end tests for the conversion pipeline."""

from pathlib import Path

import pytest

from framesmith.config import ConverterConfig
from framesmith.host import HostError, InMemoryHost
from framesmith.model.layout import (
    BLACK,
    RGB,
    Container,
    FontName,
    Padding,
    SizingMode,
    StackingDirection,
    TextLeaf,
)
from framesmith.model.outcome import Status
from framesmith.pipeline import ConversionPipeline, ConvertRequest, RequestError, convert

FIXTURES = Path(__file__).parent.parent / "fixtures"

CARD_MARKUP = '<div class="card"><h1>Title</h1><p>Body</p></div>'
CARD_CSS = (
    ".card{background-color:#eeeeee;display:flex;flex-direction:column;gap:10px} "
    "h1{font-weight:bold}"
)


class TestCardScenario:
    @pytest.mark.asyncio
    async def test_card(self):
        host = InMemoryHost()
        result = await ConversionPipeline(host).convert(ConvertRequest(CARD_MARKUP, CARD_CSS))

        assert result.status is Status.SUCCESS
        root = result.root
        assert host.document == [root]
        assert root.name == "Generated UI"

        (card,) = root.children
        assert card.name == "div"
        assert card.fill.r == pytest.approx(0.933, abs=1e-3)
        assert card.fill.g == pytest.approx(0.933, abs=1e-3)
        assert card.fill.b == pytest.approx(0.933, abs=1e-3)
        assert card.stacking is StackingDirection.VERTICAL
        assert card.item_spacing == 10

        h1, p = card.children
        assert (h1.name, p.name) == ("h1", "p")
        (title,) = h1.children
        (body,) = p.children
        assert title.characters == "Title"
        assert title.font == FontName("Inter", "Bold")
        assert body.characters == "Body"
        assert body.font == FontName("Inter", "Regular")
        assert title.fill == BLACK
        assert body.fill == BLACK

    @pytest.mark.asyncio
    async def test_summary(self):
        result = await convert(CARD_MARKUP, CARD_CSS)
        assert result.succeeded
        assert result.message.startswith("UI Generated Successfully!")
        assert result.stats.containers == 3
        assert result.stats.text_leaves == 2
        assert result.diagnostics == []


class TestRootContainer:
    @pytest.mark.asyncio
    async def test_root_layout(self):
        result = await convert("<p>x</p>")
        root = result.root
        assert root.stacking is StackingDirection.VERTICAL
        assert root.primary_sizing is SizingMode.AUTO
        assert root.counter_sizing is SizingMode.AUTO
        assert root.padding == Padding(20, 20, 20, 20)

    @pytest.mark.asyncio
    async def test_configured_root(self):
        config = ConverterConfig(root_name="Page", root_padding=8, default_font_family="Roboto")
        result = await convert("hello", config=config)
        assert result.root.name == "Page"
        assert result.root.padding == Padding(8, 8, 8, 8)
        assert result.root.children[0].font == FontName("Roboto", "Regular")

    @pytest.mark.asyncio
    async def test_empty_document(self):
        result = await convert("")
        assert result.succeeded
        assert result.root.children == []


class TestFixtureDocument:
    @pytest.mark.asyncio
    async def test_full_page(self):
        result = await convert(
            (FIXTURES / "card.html").read_text(),
            (FIXTURES / "card.css").read_text(),
        )
        assert result.succeeded, result.message
        assert result.diagnostics == []

        (body,) = result.root.children
        assert body.name == "body"
        (card,) = body.children
        assert card.fill == RGB(1, 1, 1)
        assert card.width == 320
        assert card.item_spacing == 10

        h1, p = card.children
        title = h1.children[0]
        lead = p.children[0]
        assert title.font == FontName("Roboto", "Bold")
        assert title.fill == RGB(0.2, 0.2, 0.2)
        assert lead.font == FontName("Roboto", "Italic")
        assert lead.fill == RGB(128 / 255, 128 / 255, 128 / 255)

    @pytest.mark.asyncio
    async def test_fresh_tree_per_call(self):
        first = await convert(CARD_MARKUP, CARD_CSS)
        second = await convert(CARD_MARKUP, CARD_CSS)
        assert first.root is not second.root
        assert first.root.to_dict() == second.root.to_dict()


class TestFailures:
    @pytest.mark.asyncio
    async def test_css_parse_failure(self):
        host = InMemoryHost()
        result = await ConversionPipeline(host).convert(ConvertRequest("<p>x</p>", "p { color: red; } @media print"))
        assert result.status is Status.FAIL
        assert result.message.startswith("Error: could not parse css")
        assert result.root is None
        assert host.document == []

    @pytest.mark.asyncio
    async def test_host_fault_is_fatal(self):
        class BrokenHost(InMemoryHost):
            def append_child(self, parent, child):
                raise HostError("scene graph is read-only")

        host = BrokenHost()
        result = await ConversionPipeline(host).convert(ConvertRequest("<p>x</p>"))
        assert result.failed
        assert result.message == "Error: scene graph is read-only"
        assert host.document == []

    @pytest.mark.asyncio
    async def test_local_recoveries_still_succeed(self):
        css = "p { color: chartreuse; width: auto; font-family: Papyrus; }"
        result = await convert("<p>x</p>", css)
        assert result.succeeded
        rules = sorted({d.rule for d in result.diagnostics})
        assert rules == ["font_unavailable", "malformed_dimension", "unsupported_color"]
        leaf = result.root.children[0].children[0]
        assert isinstance(leaf, TextLeaf)
        assert leaf.fill == BLACK
        assert leaf.font == FontName("Inter", "Regular")

    @pytest.mark.asyncio
    async def test_bad_declaration_does_not_fail_conversion(self):
        css = ".a{background-color:red} div{color red} p{color:blue}"
        result = await convert('<div class="a"><p>x</p></div>', css)
        assert result.succeeded
        (div,) = result.root.children
        assert div.fill == RGB(1, 0, 0)
        leaf = div.children[0].children[0]
        assert leaf.fill == RGB(0, 0, 1)
        assert [d.rule for d in result.diagnostics if d.rule == "invalid_declaration"] == ["invalid_declaration"]

    @pytest.mark.asyncio
    async def test_explicit_width_is_fixed(self):
        result = await convert("<div>x</div>", "div{width:200px}")
        (div,) = result.root.children
        assert div.width == 200
        assert div.counter_sizing is SizingMode.FIXED
        assert div.primary_sizing is SizingMode.AUTO


class TestConvertRequest:
    def test_from_payload(self):
        req = ConvertRequest.from_payload({"kind": "convert", "markup": "<p/>", "stylesheet": "p{}"})
        assert req == ConvertRequest(markup="<p/>", stylesheet="p{}")

    def test_stylesheet_optional(self):
        assert ConvertRequest.from_payload({"markup": "x"}).stylesheet == ""

    @pytest.mark.parametrize(
        "payload",
        [None, [], {"kind": "export", "markup": "x"}, {"kind": "convert"}, {"markup": "x", "stylesheet": 3}],
    )
    def test_invalid_payloads(self, payload):
        with pytest.raises(RequestError):
            ConvertRequest.from_payload(payload)


def test_container_type_exported():
    assert Container().to_dict()["type"] == "container"
