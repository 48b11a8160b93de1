from abc import ABC, abstractmethod

from jsscribe.models import EntityDescriptor


class BaseParser(ABC):
    """Abstract base class for language-specific source parsers."""

    @abstractmethod
    def parse(self, source_code: str):
        """Parse source code into a syntax tree.

        Args:
            source_code: The source code to parse

        Returns:
            Root node of the tree

        Raises:
            ScribeError: If the source cannot be parsed cleanly
        """
        pass

    @abstractmethod
    def extract_entities(self, source_code: str) -> list[EntityDescriptor]:
        """Extract all documentable entities from source code.

        Args:
            source_code: The source code to scan

        Returns:
            Located entities in source order
        """
        pass
