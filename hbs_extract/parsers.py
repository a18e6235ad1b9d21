"""
Tree-sitter backed script parsers.

Each parser is a plain function `parse(source) -> Tree` and can be passed
as the `parse` option of the extraction functions. Grammars are loaded lazily
and cached per process; parser instances are created per call so that
concurrent extraction over many files shares no mutable state.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Callable, Dict

from tree_sitter import Language, Parser, Tree

from .errors import ConfigError, ScriptSyntaxError
from .tree_sitter_support import ScriptDocument

logger = logging.getLogger(__name__)

ParseFn = Callable[[str], Tree]


@lru_cache(maxsize=None)
def get_language(lang_name: str) -> Language:
    """
    Get Tree-sitter Language instance by name.

    Args:
        lang_name: "javascript", "typescript" or "tsx"

    Returns:
        Language instance
    """
    if lang_name == "javascript":
        import tree_sitter_javascript as tsjs
        return Language(tsjs.language())

    # TS and TSX are two different grammars in one package.
    import tree_sitter_typescript as tsts
    if lang_name == "typescript":
        return Language(tsts.language_typescript())
    if lang_name == "tsx":
        return Language(tsts.language_tsx())

    raise ConfigError(f"Unknown script language: {lang_name}")


def parse_source(source: str, lang_name: str) -> Tree:
    """
    Parse script source and fail on any syntax error.

    Raises:
        ScriptSyntaxError: If the tree contains ERROR or MISSING nodes
    """
    parser = Parser(get_language(lang_name))
    tree = parser.parse(source.encode("utf-8"))

    doc = ScriptDocument(source, tree)
    if doc.has_error():
        raise _syntax_error(doc, lang_name)

    return tree


def _syntax_error(doc: ScriptDocument, lang_name: str) -> ScriptSyntaxError:
    errors = doc.get_errors()
    # has_error can be set without a reachable error node; report the root then
    node = errors[0] if errors else doc.root_node
    line, column = doc.location(node.start_byte, node.start_point)

    if node.is_missing:
        msg = f"Missing {node.type!r} ({line}:{column})"
    else:
        msg = f"Unexpected token ({line}:{column})"

    logger.debug("%s parser rejected source: %s", lang_name, msg)
    return ScriptSyntaxError(msg, lineno=line, column=column, text=doc.get_line(line))


def parse_javascript(source: str) -> Tree:
    """Parse JavaScript (including JSX)."""
    return parse_source(source, "javascript")


def parse_typescript(source: str) -> Tree:
    """Parse TypeScript."""
    return parse_source(source, "typescript")


def parse_tsx(source: str) -> Tree:
    """Parse TypeScript with JSX."""
    return parse_source(source, "tsx")


PARSERS: Dict[str, ParseFn] = {
    "javascript": parse_javascript,
    "typescript": parse_typescript,
    "tsx": parse_tsx,
}

EXTENSIONS: Dict[str, str] = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}


def get_parser(lang_name: str) -> ParseFn:
    """Get parse function by language name."""
    try:
        return PARSERS[lang_name]
    except KeyError:
        raise ConfigError(
            f"Unknown script language: {lang_name} (expected one of: {', '.join(PARSERS)})"
        ) from None


def parser_for_path(path: Path | str) -> ParseFn:
    """
    Pick a parse function by file extension.

    Raises:
        ConfigError: If the extension is not a known script extension
    """
    ext = Path(path).suffix.lower()
    lang_name = EXTENSIONS.get(ext)
    if lang_name is None:
        raise ConfigError(f"Cannot detect script language for {path}; pass the language explicitly")
    return PARSERS[lang_name]


__all__ = [
    "ParseFn",
    "get_language",
    "parse_source",
    "parse_javascript",
    "parse_typescript",
    "parse_tsx",
    "get_parser",
    "parser_for_path",
    "PARSERS",
    "EXTENSIONS",
]
