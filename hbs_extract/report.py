"""
JSON report models for `hbs-extract list`.
"""

from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .types import TemplateNode


class TemplateEntry(BaseModel):
    """One inline template as reported to the CLI consumer."""
    model_config = ConfigDict(populate_by_name=True)

    template: str
    start_line: int = Field(alias="startLine")
    start_column: int = Field(alias="startColumn")
    end_line: int = Field(alias="endLine")
    end_column: int = Field(alias="endColumn")
    start: int
    end: int
    type: str


class TemplateList(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file: str
    templates: List[TemplateEntry] = Field(default_factory=list)


def build_template_list(file_label: str, template_nodes: Sequence[TemplateNode]) -> TemplateList:
    return TemplateList(
        file=file_label,
        templates=[TemplateEntry(**node.to_dict()) for node in template_nodes],
    )


__all__ = ["TemplateEntry", "TemplateList", "build_template_list"]
