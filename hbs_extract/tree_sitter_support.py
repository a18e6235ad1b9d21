"""
Tree-sitter infrastructure for script sources.
Wraps a parsed tree together with its text and provides traversal and position utilities.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from tree_sitter import Node, Tree


class ScriptDocument:
    """
    Wrapper for a Tree-sitter parsed script (js/ts) document.

    Positions reported by Tree-sitter are 0-based rows and byte columns;
    this wrapper converts them to 1-based lines and character columns.
    """

    def __init__(self, text: str, tree: Tree):
        self.text = text
        self.tree = tree
        self._text_bytes = text.encode("utf-8")

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    def walk_tree(self, start_node: Optional[Node] = None) -> Iterator[Node]:
        """
        Walk the tree using TreeCursor for efficient traversal.

        Args:
            start_node: Node to start from (default: root)

        Yields:
            Node objects in depth-first order
        """
        if start_node is None:
            start_node = self.root_node

        cursor = start_node.walk()
        visited_children = False

        while True:
            if not visited_children:
                yield cursor.node

                if not cursor.goto_first_child():
                    visited_children = True
            elif cursor.goto_next_sibling():
                visited_children = False
            elif not cursor.goto_parent():
                break
            else:
                visited_children = True

    def get_node_text(self, node: Node) -> str:
        """Get text content for a node."""
        return self.get_byte_text(node.start_byte, node.end_byte)

    def get_byte_text(self, start_byte: int, end_byte: int) -> str:
        """Get text content for a byte range."""
        return self._text_bytes[start_byte:end_byte].decode("utf-8")

    def byte_to_char_position(self, byte_pos: int) -> int:
        """
        Correctly convert byte position to character position in Unicode text.
        If the position points into the middle of a multi-byte character,
        returns the position before that character.
        """
        if byte_pos <= 0:
            return 0
        if byte_pos >= len(self._text_bytes):
            return len(self.text)

        # UTF-8 guarantees maximum 4 bytes per character
        start = max(0, byte_pos - 4)
        for end in range(byte_pos, start - 1, -1):
            try:
                return len(self._text_bytes[:end].decode("utf-8"))
            except UnicodeDecodeError:
                continue
        return 0

    def char_column(self, byte_pos: int, byte_column: int) -> int:
        """
        Convert a byte column to a character column.

        Args:
            byte_pos: Absolute byte offset of the position
            byte_column: Byte column of the same position, as reported by Tree-sitter

        Returns:
            0-based column counted in characters
        """
        line_start = byte_pos - byte_column
        return len(self._text_bytes[line_start:byte_pos].decode("utf-8", errors="replace"))

    def location(self, byte_pos: int, point: Tuple[int, int]) -> Tuple[int, int]:
        """
        Convert a Tree-sitter position into (line, column).

        Returns:
            1-based line and 0-based character column
        """
        row, byte_column = point
        return row + 1, self.char_column(byte_pos, byte_column)

    def get_line(self, line: int) -> str:
        """Get source line by 1-based number (without the line break)."""
        lines = self.text.split("\n")
        if 1 <= line <= len(lines):
            return lines[line - 1]
        return ""

    @staticmethod
    def get_children_by_type(node: Node, node_type: str) -> List[Node]:
        """
        Get direct children of a specific type.

        Args:
            node: Parent node
            node_type: Type to filter by

        Returns:
            List of child nodes of the specified type
        """
        return [child for child in node.children if child.type == node_type]

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        if not self.tree:
            return True
        return self.root_node.has_error

    def get_errors(self) -> List[Node]:
        """Get all ERROR and MISSING nodes in the tree, in source order."""
        return [node for node in self.walk_tree() if node.is_error or node.is_missing]


__all__ = ["ScriptDocument", "Node", "Tree"]
