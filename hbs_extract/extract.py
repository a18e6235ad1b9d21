"""
Search and extract ember inline templates using the import declarations.

Both tagged templates and literal strings are extracted:

    import hbs from 'htmlbars-inline-precompile';

    const taggedTemplate = hbs`tagged template`;                        // valid
    const fromFunctionCall = hbs('template from function call');       // valid
    const withArgs = hbs('from function call with args', { moduleId: 'layout.hbs' });  // valid

Every call is independent: the tag sources are merged per call and the
parsed tree is never cached or shared.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from .collector import collect_template_nodes
from .config import merge_tag_sources
from .errors import ParserRequiredError
from .parsers import ParseFn
from .render import sort_template_nodes, to_hbs_source
from .tags import get_hbs_tags
from .tree_sitter_support import ScriptDocument
from .types import TemplateNode

logger = logging.getLogger(__name__)


def search_and_extract_hbs(
    source: str,
    *,
    parse: Optional[ParseFn] = None,
    hbs_tag_sources: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Extract the inline templates of a script file as one hbs source.

    Each template keeps its original line and column, so that the line numbers
    reported by template linters point into the script file.

    Args:
        source: The script (js/ts) file content
        parse: Parser function, e.g. `parse_typescript`
        hbs_tag_sources: Additional hbs tag sources, merged over the defaults

    Returns:
        The hbs source, empty string if no inline template was found

    Raises:
        ParserRequiredError: If `parse` is missing or not callable
        SyntaxError: Whatever the parser raises for an invalid source
            (`ScriptSyntaxError` for the bundled parsers)
    """
    template_nodes = get_template_nodes(source, parse=parse, hbs_tag_sources=hbs_tag_sources)
    # no inline template(s) found
    if not template_nodes:
        return ""

    return to_hbs_source(template_nodes)


def get_template_nodes(
    source: str,
    *,
    parse: Optional[ParseFn] = None,
    hbs_tag_sources: Optional[Mapping[str, Any]] = None,
    sort_by_start_key: bool = False,
) -> List[TemplateNode]:
    """
    Parse the script source and get only the template nodes.

    Args:
        source: The script (js/ts) file content
        parse: Parser function, e.g. `parse_javascript`
        hbs_tag_sources: Additional hbs tag sources, merged over the defaults
        sort_by_start_key: Order the nodes by their position in the source
            instead of the tree walk order

    Returns:
        Extracted template nodes (possibly empty)

    Raises:
        ParserRequiredError: If `parse` is missing or not callable
    """
    tag_sources = merge_tag_sources(hbs_tag_sources)
    doc = _get_document(source, parse)

    hbs_tags = get_hbs_tags(doc, tag_sources)
    # no import declarations, or none of them is a valid hbs tag source
    if hbs_tags is None:
        logger.debug("No hbs tag imports found")
        return []

    template_nodes = collect_template_nodes(doc, hbs_tags)

    if sort_by_start_key:
        return sort_template_nodes(template_nodes)

    return template_nodes


def _get_document(source: str, parse: Optional[ParseFn]) -> ScriptDocument:
    if not callable(parse):
        raise ParserRequiredError("hbs-extract: parse is required function")

    # parse errors propagate to the caller as is
    tree = parse(source)
    return ScriptDocument(source, tree)


__all__ = ["search_and_extract_hbs", "get_template_nodes"]
