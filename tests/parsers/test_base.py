import pytest

from jsscribe.parsers.base import BaseParser


def test_cannot_instantiate_base_parser():
    with pytest.raises(TypeError) as exc_info:
        BaseParser()

    assert "abstract" in str(exc_info.value).lower()


def test_subclass_must_implement_extract_entities():
    class IncompleteParser(BaseParser):
        def parse(self, source_code):
            return None

    with pytest.raises(TypeError) as exc_info:
        IncompleteParser()

    assert "extract_entities" in str(exc_info.value)


def test_subclass_must_implement_parse():
    class IncompleteParser(BaseParser):
        def extract_entities(self, source_code):
            return []

    with pytest.raises(TypeError) as exc_info:
        IncompleteParser()

    assert "parse" in str(exc_info.value)
