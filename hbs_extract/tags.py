"""
Hbs tag resolution from top-level import declarations.
Works on the Tree-sitter AST only, no regex parsing of import text.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .config import DEFAULT_SPECIFIER, TagSources, TagSpecifier
from .tree_sitter_support import Node, ScriptDocument
from .types import HbsTags

logger = logging.getLogger(__name__)


def get_hbs_tags(doc: ScriptDocument, tag_sources: TagSources) -> Optional[HbsTags]:
    """
    Get the hbs tags from the import declarations, e.g. `import hbs from 'source'`.

    Args:
        doc: Parsed script document
        tag_sources: Merged hbs tag sources, e.g.
            `{"ember-cli-htmlbars": "hbs", "htmlbars-inline-precompile": "default"}`

    Returns:
        Local names usable as hbs tags, or None if the script has no import
        declarations or none of them is a valid hbs tag source.
    """
    import_nodes = doc.get_children_by_type(doc.root_node, "import_statement")
    if not import_nodes:
        return None

    tags: List[str] = []
    for node in import_nodes:
        # e.g. `ember-cli-htmlbars`, `htmlbars-inline-precompile`
        source = _import_source(doc, node)
        if source is None or source not in tag_sources:
            continue

        tags.extend(_tags_from_import(doc, node, tag_sources[source]))

    if not tags:
        return None

    logger.debug("Resolved hbs tags: %s", ", ".join(sorted(set(tags))))
    return frozenset(tags)


def _import_source(doc: ScriptDocument, node: Node) -> Optional[str]:
    source_node = node.child_by_field_name("source")
    if source_node is None:
        return None
    # Remove quotes - could be single or double
    return doc.get_node_text(source_node)[1:-1]


def _tags_from_import(doc: ScriptDocument, node: Node, wanted: TagSpecifier) -> List[str]:
    """Local names bound by one import declaration that match the wanted specifier."""
    clause = next((c for c in node.children if c.type == "import_clause"), None)
    if clause is None:
        # Side-effect import: import 'module'
        return []

    if wanted == DEFAULT_SPECIFIER:
        for child in clause.children:
            if child.type == "identifier":
                return [doc.get_node_text(child)]

    tags: List[str] = []
    for named_imports in doc.get_children_by_type(clause, "named_imports"):
        for specifier in doc.get_children_by_type(named_imports, "import_specifier"):
            name_node = specifier.child_by_field_name("name")
            if name_node is None:
                continue
            imported = _export_name(doc, name_node)
            if not _matches(imported, wanted):
                continue

            # Aliased import: { hbs as h }
            alias_node = specifier.child_by_field_name("alias")
            tags.append(doc.get_node_text(alias_node if alias_node is not None else name_node))

    return tags


def _export_name(doc: ScriptDocument, node: Node) -> str:
    text = doc.get_node_text(node)
    # String export names: import { "hbs" as h } from '...'
    if node.type == "string":
        return text[1:-1]
    return text


def _matches(imported: str, wanted: TagSpecifier) -> bool:
    if isinstance(wanted, str):
        return imported == wanted
    return imported in wanted


__all__ = ["get_hbs_tags"]
