"""Tests for the HTML classname counter."""

from styleripper.parser.html import parse_html, serialize_html
from styleripper.ripper.counter import count_html_classes


class TestCountHtmlClasses:
    def test_counts_every_occurrence(self):
        doc = parse_html('<div class="header"><p class="text header"></p><h1 class="header"></h1></div>')
        assert count_html_classes(doc, {}) == {"header": 3, "text": 1}

    def test_repeated_token_on_one_element(self):
        doc = parse_html('<p class="a b a"></p>')
        assert count_html_classes(doc, {}) == {"a": 2, "b": 1}

    def test_accumulates_across_documents(self):
        counts: dict[str, int] = {}
        count_html_classes(parse_html('<p class="a"></p>'), counts)
        count_html_classes(parse_html('<p class="a b"></p>'), counts)
        assert counts == {"a": 2, "b": 1}

    def test_insertion_follows_document_order(self):
        doc = parse_html('<p class="z"></p><p class="m a"></p>')
        assert list(count_html_classes(doc, {})) == ["z", "m", "a"]

    def test_no_classes(self):
        assert count_html_classes(parse_html("<p>plain</p>"), {}) == {}

    def test_document_unchanged(self):
        source = '<p class="a b">x</p>'
        doc = parse_html(source)
        count_html_classes(doc, {})
        assert serialize_html(doc) == source
