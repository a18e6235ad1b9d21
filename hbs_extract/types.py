from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional

from .tree_sitter_support import Node

# Local identifiers acting as hbs tags in one file, e.g. {"hbs", "h"}.
HbsTags = FrozenSet[str]


@dataclass(frozen=True)
class TemplateNode:
    """
    One extracted inline template.

    Lines are 1-based, columns are 0-based, both counted in characters.
    `start`/`end` are character offsets in the script source and are used
    only for ordering.
    """
    template: str        # raw text between the delimiters
    start_line: int
    start_column: int
    end_line: int
    end_column: int
    start: int
    end: int
    type: str            # provider node type: "template_string" | "string"
    # Provider node passed through as is
    node: Optional[Node] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "template": self.template,
            "start_line": self.start_line,
            "start_column": self.start_column,
            "end_line": self.end_line,
            "end_column": self.end_column,
            "start": self.start,
            "end": self.end,
            "type": self.type,
        }


__all__ = ["HbsTags", "TemplateNode"]
