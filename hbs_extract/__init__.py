from .config import DEFAULT_HBS_TAG_SOURCES, ExtractCfg, load_config, merge_tag_sources
from .errors import ConfigError, HbsExtractError, ParserRequiredError, ScriptSyntaxError
from .extract import get_template_nodes, search_and_extract_hbs
from .parsers import parse_javascript, parse_tsx, parse_typescript, parser_for_path
from .render import sort_template_nodes, to_hbs_source
from .types import TemplateNode

__all__ = [
    "search_and_extract_hbs",
    "get_template_nodes",
    "sort_template_nodes",
    "to_hbs_source",
    "TemplateNode",
    "DEFAULT_HBS_TAG_SOURCES",
    "merge_tag_sources",
    "ExtractCfg",
    "load_config",
    "parse_javascript",
    "parse_typescript",
    "parse_tsx",
    "parser_for_path",
    "HbsExtractError",
    "ParserRequiredError",
    "ConfigError",
    "ScriptSyntaxError",
]
