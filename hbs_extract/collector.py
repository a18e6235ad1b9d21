"""
Template node collection.

Walks the whole tree and extracts the inline templates passed to hbs tags:

    hbs`tagged template`                         -> tagged template
    hbs('string literal')                        -> string literal argument
    hbs(`template literal`)                      -> template literal argument
    hbs('with options', { moduleId: 'x.hbs' })   -> only literal arguments are taken

Only the leading chunk of a template literal (up to the first `${...}`)
is extracted; interpolation inside inline templates is not supported.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .tree_sitter_support import Node, ScriptDocument
from .types import HbsTags, TemplateNode

logger = logging.getLogger(__name__)


def collect_template_nodes(doc: ScriptDocument, hbs_tags: HbsTags) -> List[TemplateNode]:
    """
    Traverse the AST and get the template nodes in walk order.

    Args:
        doc: Parsed script document
        hbs_tags: Local names of the hbs tags, e.g. `{"hbs", "handlebars"}`

    Returns:
        Template nodes in the order the tree walk reached them
    """
    template_nodes: List[TemplateNode] = []

    for node in doc.walk_tree():
        if node.type != "call_expression":
            continue

        tag = _tag_name(doc, node)
        if tag is None or tag not in hbs_tags:
            continue

        arguments = node.child_by_field_name("arguments")
        if arguments is None:
            continue

        if arguments.type == "template_string":
            template_nodes.append(_from_template_string(doc, arguments))
        elif arguments.type == "arguments":
            template_nodes.extend(_from_call_arguments(doc, arguments))

    logger.debug("Collected %d template node(s)", len(template_nodes))
    return template_nodes


def _tag_name(doc: ScriptDocument, call: Node) -> Optional[str]:
    # `obj.hbs(...)` and `hbs?.(...)` are not recognized
    if call.child_by_field_name("optional_chain") is not None:
        return None
    function = call.child_by_field_name("function")
    if function is None or function.type != "identifier":
        return None
    return doc.get_node_text(function)


def _from_call_arguments(doc: ScriptDocument, arguments: Node) -> List[TemplateNode]:
    out: List[TemplateNode] = []
    for argument in arguments.named_children:
        if argument.type == "string":
            out.append(_from_string(doc, argument))
        elif argument.type == "template_string":
            out.append(_from_template_string(doc, argument))
    return out


def _from_string(doc: ScriptDocument, node: Node) -> TemplateNode:
    start_line, start_column = doc.location(node.start_byte, node.start_point)
    end_line, end_column = doc.location(node.end_byte, node.end_point)

    return TemplateNode(
        template=doc.get_byte_text(node.start_byte + 1, node.end_byte - 1),
        start_line=start_line,
        # the string node starts at the quote char, not at the first template
        # char, so it is shifted to keep the indentation of the template text
        start_column=start_column + 1,
        end_line=end_line,
        end_column=end_column,
        start=doc.byte_to_char_position(node.start_byte),
        end=doc.byte_to_char_position(node.end_byte),
        type=node.type,
        node=node,
    )


def _from_template_string(doc: ScriptDocument, node: Node) -> TemplateNode:
    """Extract the first chunk of a template literal (between '`' and '${' or the closing '`')."""
    opening, closing = node.children[0], node.children[-1]

    chunk_end = next(
        (c for c in node.children if c.type == "template_substitution"),
        closing,
    )

    start_byte = opening.end_byte
    end_byte = chunk_end.start_byte
    start_line, start_column = doc.location(start_byte, opening.end_point)
    end_line, end_column = doc.location(end_byte, chunk_end.start_point)

    return TemplateNode(
        template=doc.get_byte_text(start_byte, end_byte),
        start_line=start_line,
        start_column=start_column,
        end_line=end_line,
        end_column=end_column,
        start=doc.byte_to_char_position(start_byte),
        end=doc.byte_to_char_position(end_byte),
        type=node.type,
        node=node,
    )


__all__ = ["collect_template_nodes"]
