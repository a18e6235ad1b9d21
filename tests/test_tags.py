"""
Tests for hbs tag resolution from import declarations.
"""

import pytest

from hbs_extract.config import merge_tag_sources
from hbs_extract.parsers import parse_javascript
from hbs_extract.tags import get_hbs_tags
from hbs_extract.tree_sitter_support import ScriptDocument
from .conftest import SCRIPT_PARSERS


def tags_of(code: str, parse=parse_javascript, **overrides):
    doc = ScriptDocument(code, parse(code))
    return get_hbs_tags(doc, merge_tag_sources(overrides or None))


@pytest.mark.parametrize("parse", SCRIPT_PARSERS)
def test_default_import(parse):
    assert tags_of("import hbs from 'htmlbars-inline-precompile';", parse) == {"hbs"}


@pytest.mark.parametrize("parse", SCRIPT_PARSERS)
def test_renamed_named_import(parse):
    assert tags_of("import { hbs as h } from 'ember-cli-htmlbars';", parse) == {"h"}


def test_named_import_set():
    code = "import { setComponentTemplate, precompileTemplate, createTemplate as ct } from '@glimmer/core';"

    assert tags_of(code) == {"precompileTemplate", "ct"}


def test_no_imports_is_distinct_from_no_tags():
    assert tags_of("const a = 1;") is None
    assert tags_of("import hbs from 'some-other-module';") is None


def test_side_effect_and_namespace_imports_contribute_nothing():
    code = (
        "import 'ember-cli-htmlbars';\n"
        "import * as htmlbars from 'ember-cli-htmlbars';\n"
    )
    assert tags_of(code) is None


def test_default_specifier_requires_default_binding():
    code = "import { precompile } from 'htmlbars-inline-precompile';"
    assert tags_of(code) is None


def test_default_binding_next_to_named_imports():
    code = "import hbs, { precompile } from 'htmlbars-inline-precompile';"
    assert tags_of(code) == {"hbs"}


def test_named_specifier_ignores_default_binding():
    code = "import htmlbars, { hbs } from 'ember-cli-htmlbars';"
    assert tags_of(code) == {"hbs"}


def test_multiple_sources_contribute_together():
    code = (
        "import hbs from 'ember-cli-htmlbars-inline-precompile';\n"
        "import { hbs as h } from 'ember-cli-htmlbars';\n"
        "import { handlebars } from 'another-custom-hbs-source';\n"
    )

    assert tags_of(code) == {"hbs", "h"}
    assert tags_of(code, **{"another-custom-hbs-source": "handlebars"}) == {"hbs", "h", "handlebars"}


def test_only_top_level_imports_are_inspected():
    code = (
        "import { module } from 'qunit';\n"
        "async function load() {\n"
        "  const { hbs } = await import('ember-cli-htmlbars');\n"
        "  return hbs;\n"
        "}\n"
    )
    assert tags_of(code) is None


def test_source_names_are_exact():
    # no prefix matching or globbing
    assert tags_of("import { hbs } from 'ember-cli-htmlbars/sub';") is None
    assert tags_of("import { hbs } from \"ember-cli-htmlbars\";") == {"hbs"}
