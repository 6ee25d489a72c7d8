"""Tests for the cssutils-backed CSS tree provider."""

from styleripper.model.css import AtBlock, ClassSelector, Comment, Opaque, Rule, walk
from styleripper.parser.css import parse_css, serialize_css


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseCss:
    def test_style_rule(self):
        sheet = parse_css(".header { color: blue; }")
        (rule,) = sheet.children
        assert isinstance(rule, Rule)
        assert rule.declarations == "color:blue"
        assert [n.name for n, _ in walk(sheet, ClassSelector)] == ["header"]

    def test_multiple_declarations(self):
        (rule,) = parse_css(".a { color: red; margin: 0 }").children
        assert rule.declarations == "color:red;margin:0"

    def test_selector_list_split(self):
        (rule,) = parse_css(".used, .unused { color: red }").children
        assert len(rule.selectors.selectors) == 2

    def test_media_block(self):
        (block,) = parse_css("@media print { .a { color: red } .b { color: blue } }").children
        assert isinstance(block, AtBlock)
        assert block.prelude == "@media print"
        assert len(block.children) == 2
        assert all(isinstance(child, Rule) for child in block.children)

    def test_font_face_has_no_selectors(self):
        (rule,) = parse_css("@font-face { font-family: x; }").children
        assert isinstance(rule, Rule)
        assert rule.selectors is None
        assert rule.at_keyword == "@font-face"

    def test_comment(self):
        sheet = parse_css("/* banner */ .a { color: red }")
        assert isinstance(sheet.children[0], Comment)

    def test_page_rule_kept_opaque(self):
        sheet = parse_css("@page { margin: 1cm } .a { color: red }")
        assert isinstance(sheet.children[0], Opaque)

    def test_escaped_classname(self):
        sheet = parse_css(r".sm\:flex { display: flex }")
        (node, _), = list(walk(sheet, ClassSelector))
        assert node.clean_name == "sm:flex"

    def test_empty_source(self):
        assert parse_css("").children == []


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class TestSerializeCss:
    def test_compact_rule(self):
        assert serialize_css(parse_css(".a  >  .b { color : red ; }")) == ".a>.b{color:red}"

    def test_media_block(self):
        source = "@media print { .a { color: red } }"
        assert serialize_css(parse_css(source)) == "@media print{.a{color:red}}"

    def test_reserialization_is_stable(self):
        source = ".a, .b .c { color: red } @media print { .d { margin: 0 } }"
        once = serialize_css(parse_css(source))
        assert serialize_css(parse_css(once)) == once

    def test_escape_preserved(self):
        assert serialize_css(parse_css(r".sm\:flex{display:flex}")) == r".sm\:flex{display:flex}"


# ---------------------------------------------------------------------------
# Grouping at-rules without a cssutils model
# ---------------------------------------------------------------------------


class TestGroupingAtRules:
    def test_supports_becomes_block(self):
        sheet = parse_css("@supports (display: grid) { .header { display: grid } } .a { color: red }")
        block, rule = sheet.children
        assert isinstance(block, AtBlock)
        assert block.prelude == "@supports (display: grid)"
        assert [n.name for n, _ in walk(block, ClassSelector)] == ["header"]
        assert isinstance(rule, Rule)

    def test_container_and_layer(self):
        source = "@container (min-width:400px){.card{color:red}}@layer base{.card{color:blue}}"
        assert serialize_css(parse_css(source)) == source

    def test_selectors_not_mangled(self):
        css = serialize_css(parse_css("@supports (display:grid){.header{display:grid}}"))
        assert css == "@supports (display:grid){.header{display:grid}}"

    def test_nested_blocks(self):
        sheet = parse_css("@layer base { @media print { .a { color: red } } }")
        (layer,) = sheet.children
        (media,) = layer.children
        assert isinstance(media, AtBlock)
        assert media.prelude == "@media print"

    def test_layer_statement_stays_opaque(self):
        sheet = parse_css("@layer base, theme; .a { color: red }")
        assert isinstance(sheet.children[0], Opaque)
        assert isinstance(sheet.children[1], Rule)

    def test_braces_in_strings_and_comments_ignored(self):
        source = '.a::after { content: "@supports {" } /* @layer x { */ .b { color: red }'
        sheet = parse_css(source)
        assert not any(isinstance(node, AtBlock) for node in sheet.children)
        assert [n.name for n, _ in walk(sheet, ClassSelector)] == ["a", "b"]

    def test_order_preserved(self):
        source = ".a{color:red}@supports (display:grid){.b{color:blue}}.c{margin:0}"
        assert serialize_css(parse_css(source)) == source
