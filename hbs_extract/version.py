from __future__ import annotations

from importlib import metadata

_DIST_NAME = "hbs-extract"


def tool_version() -> str:
    """Installed hbs-extract version, 0.0.0 when running from a source checkout."""
    try:
        return metadata.version(_DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["tool_version"]
