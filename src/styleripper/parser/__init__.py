from styleripper.errors import ParseError
from styleripper.parser.css import parse_css, serialize_css
from styleripper.parser.html import parse_html, serialize_html
from styleripper.parser.selectors import parse_selector_list, serialize_selector_list

__all__ = [
    "ParseError",
    "parse_css",
    "serialize_css",
    "parse_html",
    "serialize_html",
    "parse_selector_list",
    "serialize_selector_list",
]
