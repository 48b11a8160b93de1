from pathlib import Path

from jsscribe.config import ScanConfig
from jsscribe.models import EntityDescriptor
from jsscribe.parsers import get_parser_for_file
from jsscribe.parsers.javascript_parser import JavaScriptParser


def scout(source_code: str, config: ScanConfig | None = None) -> list[EntityDescriptor]:
    """Find all documentable functions and classes in JavaScript source.

    Args:
        source_code: Text content of a JavaScript file
        config: Scan configuration (defaults if None)

    Returns:
        Located entities in source order

    Raises:
        JavaScriptSyntaxError: If the source does not parse
    """
    return JavaScriptParser(config).extract_entities(source_code)


def scout_file(file_path: Path, config: ScanConfig | None = None) -> list[EntityDescriptor]:
    """Read a JavaScript file and scout its contents.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file type not supported
        JavaScriptSyntaxError: If the source does not parse
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    parser = get_parser_for_file(file_path, config)
    if parser is None:
        raise ValueError(f"Unsupported file type: {file_path}")

    return parser.extract_entities(file_path.read_text(encoding="utf8"))
