"""
Tests for template node collection and position metadata.
"""

import pytest

from hbs_extract import get_template_nodes
from hbs_extract.parsers import parse_javascript
from .conftest import SCRIPT_PARSERS

IMPORT = "import hbs from 'htmlbars-inline-precompile';\n"


def nodes_of(body: str, parse=parse_javascript, **kwargs):
    return get_template_nodes(IMPORT + body, parse=parse, **kwargs)


@pytest.mark.parametrize("parse", SCRIPT_PARSERS)
def test_tagged_template_positions(parse):
    [node] = nodes_of("const a = hbs`<p></p>`;\n", parse)

    assert node.template == "<p></p>"
    assert (node.start_line, node.start_column) == (2, 14)
    assert (node.end_line, node.end_column) == (2, 21)
    assert (node.start, node.end) == (60, 67)
    assert node.type == "template_string"
    assert node.node is not None


@pytest.mark.parametrize("parse", SCRIPT_PARSERS)
def test_string_literal_positions(parse):
    [node] = nodes_of("const a = hbs('<p></p>');\n", parse)

    assert node.template == "<p></p>"
    # the quote char is skipped
    assert (node.start_line, node.start_column) == (2, 15)
    assert (node.end_line, node.end_column) == (2, 23)
    assert (node.start, node.end) == (60, 69)
    assert node.type == "string"


def test_template_literal_argument():
    [node] = nodes_of("const a = hbs(`<p>{{this.a}}</p>`);\n")

    assert node.template == "<p>{{this.a}}</p>"
    assert (node.start_line, node.start_column) == (2, 15)
    assert node.type == "template_string"


def test_literal_arguments_next_to_options_object():
    nodes = nodes_of("hbs('<a></a>', { moduleName: 'layout.hbs' });\n")

    assert [n.template for n in nodes] == ["<a></a>"]


def test_every_literal_argument_is_taken():
    nodes = nodes_of("hbs({ Foo: 42 }, '<a></a>', `<b></b>`);\n")

    assert [n.template for n in nodes] == ["<a></a>", "<b></b>"]


def test_raw_text_is_kept():
    nodes = nodes_of("hbs`<p title=\"\\u00e9\">\\n</p>`;\nhbs('<p>it\\'s</p>');\n")

    assert [n.template for n in nodes] == ['<p title="\\u00e9">\\n</p>', "<p>it\\'s</p>"]


def test_only_first_chunk_of_interpolated_template():
    [node] = nodes_of("hbs`<p>{{this.a}}</p>${extra}<b></b>`;\n")

    assert node.template == "<p>{{this.a}}</p>"
    assert node.end_column == len("hbs`<p>{{this.a}}</p>")


def test_multiline_template_end_position():
    [node] = nodes_of("hbs`\n  <p></p>\n`;\n")

    assert node.template == "\n  <p></p>\n"
    assert (node.start_line, node.end_line) == (2, 4)
    assert node.end_column == 0


class TestUnsupportedShapes:

    def test_tag_as_value(self):
        assert nodes_of("const compile = hbs;\nrender(compile);\n") == []

    def test_tag_as_method(self):
        assert nodes_of("Ember.hbs('<a></a>');\nthis.hbs`<b></b>`;\n") == []

    def test_optional_call(self):
        assert nodes_of("hbs?.('<a></a>');\n") == []

    def test_call_without_arguments(self):
        assert nodes_of("hbs();\n") == []

    def test_non_literal_arguments(self):
        assert nodes_of("hbs(template, 42, [`<a></a>`]);\n") == []

    def test_other_identifiers(self):
        assert nodes_of("handlebars`<a></a>`;\nh('<b></b>');\n") == []


def test_nested_invocations():
    nodes = nodes_of("render(hbs`<a></a>`, () => hbs('<b></b>'));\n")

    assert [n.template for n in nodes] == ["<a></a>", "<b></b>"]


NESTED_CALLS = "hbs(wrap(hbs('<y/>')), '<z/>');\n"


def test_walk_order_visits_outer_call_first():
    nodes = nodes_of(NESTED_CALLS)

    # the outer call's literal comes before the nested call's one
    assert [n.template for n in nodes] == ["<z/>", "<y/>"]


def test_sorted_by_start_key():
    nodes = nodes_of(NESTED_CALLS, sort_by_start_key=True)

    assert [n.template for n in nodes] == ["<y/>", "<z/>"]
    assert nodes[0].start < nodes[1].start


def test_columns_are_counted_in_characters():
    [node] = nodes_of("/* ünïcödé */ const t = hbs`<p></p>`;\n")

    assert node.start_column == 28
    assert node.start == len(IMPORT) + 28
