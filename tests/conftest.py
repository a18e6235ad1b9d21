"""
Shared fixtures and utilities for hbs-extract tests.
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from hbs_extract.parsers import parse_javascript, parse_tsx, parse_typescript

FIXTURES = Path(__file__).parent / "fixtures"
REPO_ROOT = Path(__file__).resolve().parent.parent

# Parsers able to read plain JavaScript; all of them must give the same result.
SCRIPT_PARSERS = [
    pytest.param(parse_javascript, id="javascript"),
    pytest.param(parse_typescript, id="typescript"),
    pytest.param(parse_tsx, id="tsx"),
]

# Parsers able to read TypeScript-only syntax.
TS_PARSERS = [
    pytest.param(parse_typescript, id="typescript"),
    pytest.param(parse_tsx, id="tsx"),
]


def read_fixture(rel_path: str) -> str:
    """Read a fixture file with normalized line breaks."""
    text = (FIXTURES / rel_path).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n")


def run_cli(cwd: Path, *args: str, stdin: str | None = None) -> subprocess.CompletedProcess:
    """Run hbs_extract.cli with the given arguments in the given directory."""
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    env["PYTHONIOENCODING"] = "utf-8"
    env.pop("HBS_EXTRACT_DEBUG", None)
    return subprocess.run(
        [sys.executable, "-m", "hbs_extract.cli", *args],
        cwd=cwd, env=env, input=stdin, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    return json.loads(s)
