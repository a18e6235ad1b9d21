from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Tuple

from .config import ExtractCfg, load_config, parse_tag_source_arg
from .errors import HbsExtractError
from .extract import get_template_nodes, search_and_extract_hbs
from .parsers import PARSERS, ParseFn, get_parser, parser_for_path
from .report import build_template_list
from .version import tool_version

_LOG = logging.getLogger("hbs_extract")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("HBS_EXTRACT_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hbs-extract",
        description="Extract ember inline templates from js/ts sources",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Common arguments for render/list
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "file",
            help="script file (js/ts), or - to read from stdin (requires --lang)",
        )
        sp.add_argument(
            "--lang",
            default="auto",
            choices=["auto", *PARSERS],
            help="script grammar; auto detects it by file extension",
        )
        sp.add_argument(
            "--config",
            metavar="YAML",
            help="YAML file with additional hbs_tag_sources",
        )
        sp.add_argument(
            "--tag-source",
            action="append",
            metavar="MODULE=SPEC",
            help="additional hbs tag source, SPEC is 'default' or comma-separated export names (repeatable)",
        )
        sp.add_argument(
            "--verbose",
            action="store_true",
            help="debug logging to stderr",
        )

    sp_render = sub.add_parser("render", help="Only the extracted hbs text (not JSON)")
    add_common(sp_render)

    sp_list = sub.add_parser("list", help="Extracted templates with positions (JSON)")
    add_common(sp_list)
    sp_list.add_argument(
        "--walk-order",
        action="store_true",
        help="keep the tree walk order instead of sorting by source position",
    )

    return p


def _cfg(ns: argparse.Namespace) -> ExtractCfg:
    """Tag sources: built-ins, then --config file, then --tag-source entries."""
    cfg = load_config(Path(ns.config)) if ns.config else ExtractCfg()
    overrides = [parse_tag_source_arg(arg) for arg in (ns.tag_source or [])]
    return cfg.with_overrides(overrides)


def _read_source(ns: argparse.Namespace) -> Tuple[str, str, ParseFn]:
    """
    Read the script source and pick the parser.

    Returns:
        (file label, source text, parse function)
    """
    if ns.file == "-":
        if ns.lang == "auto":
            raise HbsExtractError("Reading from stdin requires an explicit --lang")
        return "<stdin>", sys.stdin.read(), get_parser(ns.lang)

    path = Path(ns.file)
    if not path.is_file():
        raise HbsExtractError(f"File not found: {path}")

    parse = parser_for_path(path) if ns.lang == "auto" else get_parser(ns.lang)
    return str(path), path.read_text(encoding="utf-8"), parse


def main(argv: List[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(bool(getattr(ns, "verbose", False)))
    label = ns.file

    try:
        cfg = _cfg(ns)
        label, source, parse = _read_source(ns)
        _LOG.debug("Extracting inline templates from %s", label)

        if ns.cmd == "render":
            sys.stdout.write(
                search_and_extract_hbs(source, parse=parse, hbs_tag_sources=cfg.hbs_tag_sources)
            )
            return 0

        if ns.cmd == "list":
            nodes = get_template_nodes(
                source,
                parse=parse,
                hbs_tag_sources=cfg.hbs_tag_sources,
                sort_by_start_key=not ns.walk_order,
            )
            sys.stdout.write(build_template_list(label, nodes).model_dump_json(by_alias=True))
            return 0

    except SyntaxError as e:
        # parse failures of the bundled parsers carry the location
        where = f"{label}:{e.lineno}:{e.offset}" if e.lineno else label
        sys.stderr.write(f"{where}: {e.msg}\n")
        return 2
    except HbsExtractError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
