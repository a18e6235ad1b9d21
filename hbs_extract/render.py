"""
Ordering and drawing of extracted template nodes into one hbs document.
"""

from __future__ import annotations

import re
from typing import List, Sequence

from .types import TemplateNode

# Trailing spaces/tabs after the last line break of a multiline template
_TRAILING_INDENT_RE = re.compile(r"(\n)[ \t]+\Z")


def sort_template_nodes(template_nodes: Sequence[TemplateNode]) -> List[TemplateNode]:
    """
    Sort the template nodes by their start offset in the script source.

    The sort is stable, so nodes reported at the same offset keep their
    relative order. The input sequence is not modified.
    """
    return sorted(template_nodes, key=lambda node: node.start)


def to_hbs_source(template_nodes: Sequence[TemplateNode]) -> str:
    """
    Draw the template nodes into a single hbs source.

    Every template is placed at its original line and column: blank lines
    fill the vertical gap from the previous template, leading spaces restore
    the column of single-line templates.

    Args:
        template_nodes: Template nodes in any order

    Returns:
        The hbs source, empty string for no templates
    """
    parts: List[str] = []
    last_parsed_line = 1

    for node in sort_template_nodes(template_nodes):
        vertical_gap = "\n" * (node.start_line - last_parsed_line) if node.start_line > last_parsed_line else ""

        # A template starting with a line break carries its own indentation
        if node.start_column > 0 and not node.template.startswith(("\n", "\r\n")):
            indentation = " " * node.start_column
        else:
            indentation = ""

        # no trailing whitespace on the closing line of multiline templates
        template = _TRAILING_INDENT_RE.sub(r"\1", node.template)

        parts.append(vertical_gap + indentation + template)
        last_parsed_line = node.end_line

    return "".join(parts)


__all__ = ["sort_template_nodes", "to_hbs_source"]
