from pathlib import Path

from jsscribe.config import ScanConfig
from jsscribe.parsers.base import BaseParser
from jsscribe.parsers.javascript_parser import JavaScriptParser

JAVASCRIPT_EXTENSIONS = (".js", ".mjs", ".cjs", ".jsx")


def get_parser_for_file(file_path: Path, config: ScanConfig | None = None) -> BaseParser | None:
    """Return a parser for the file's language, or None if it is unsupported."""
    if file_path.suffix.lower() in JAVASCRIPT_EXTENSIONS:
        return JavaScriptParser(config)
    return None


__all__ = ["BaseParser", "JavaScriptParser", "get_parser_for_file"]
