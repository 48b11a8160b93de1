from pathlib import Path

from jsscribe.config import ScanConfig
from jsscribe.parsers import get_parser_for_file
from jsscribe.parsers.javascript_parser import JavaScriptParser


def test_get_parser_for_javascript_file():
    parser = get_parser_for_file(Path("test.js"))

    assert parser is not None
    assert isinstance(parser, JavaScriptParser)


def test_get_parser_for_module_extensions():
    for name in ("test.mjs", "test.cjs", "test.jsx"):
        assert isinstance(get_parser_for_file(Path(name)), JavaScriptParser)


def test_get_parser_for_uppercase_extension():
    parser = get_parser_for_file(Path("test.JS"))

    assert parser is not None
    assert isinstance(parser, JavaScriptParser)


def test_get_parser_passes_config():
    config = ScanConfig(tab_size=4)

    parser = get_parser_for_file(Path("test.js"), config)

    assert parser.config is config


def test_get_parser_for_unsupported_file():
    parser = get_parser_for_file(Path("test.txt"))

    assert parser is None


def test_get_parser_for_python_file():
    parser = get_parser_for_file(Path("test.py"))

    # Only JavaScript is supported
    assert parser is None
