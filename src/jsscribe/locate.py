"""Map header patterns back onto line and indentation in the source text."""

import logging
from dataclasses import dataclass

from jsscribe.errors import ClassNotFoundError
from jsscribe.models import NOT_FOUND, LocationInfo
from jsscribe.patterns import MANY, WHITESPACE, HeaderPattern, PatternMatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassText:
    """Text of a class from its ``class`` keyword through its closing brace."""
    start: int
    text: str


def index_to_line(index: int, lines: list[str]) -> LocationInfo:
    """Find the line and indentation of a character offset.

    Args:
        index: Offset of the character in the joined text
        lines: Lines of the text, without terminators

    Returns:
        LocationInfo with a 1-indexed line and 0-indexed indent, or NOT_FOUND
    """
    if index < 0:
        return NOT_FOUND

    count = 0
    for i, line in enumerate(lines):
        line_start = count
        count += len(line) + 1
        if index < count:
            return LocationInfo(line=i + 1, indent=index - line_start)
    return NOT_FOUND


def block_end(text: str, brace_index: int) -> int:
    """Return the offset just past the brace that closes the one at brace_index.

    Braces inside strings, template literals and comments are counted like any
    other. An unbalanced block runs to the end of the text.
    """
    braces = 0
    for i in range(brace_index, len(text)):
        char = text[i]
        if char == "{":
            braces += 1
        elif char == "}":
            braces -= 1
            if braces == 0:
                return i + 1
    return len(text)


def extract_class(
    class_name: str,
    text: str,
    opening: HeaderPattern | None = None,
    start: int = 0,
) -> ClassText:
    """Extract all text within a class, including its declaration.

    The class is the first match of ``opening`` at or after ``start``; by
    default that is ``class <name>``. Counting starts at the first opening
    brace of the match (or after it) and stops when the braces balance.

    Raises:
        ClassNotFoundError: If the opening does not occur in the text
    """
    if opening is None:
        opening = HeaderPattern().then("class").then(class_name, MANY)
    match = opening.search(text, start)
    if match is None:
        raise ClassNotFoundError(class_name)

    brace = match.end - 1 if match.text.endswith("{") else text.find("{", match.end)
    finish = len(text) if brace == -1 else block_end(text, brace)
    return ClassText(start=match.index, text=text[match.index:finish])


class ClassBodyIndex:
    """Per-run cache of isolated class texts, keyed by class name.

    Two classes sharing a name share the first one's entry.
    """

    def __init__(self, text: str):
        self.text = text
        self._entries: dict[str, ClassText | None] = {}

    def get(
        self,
        class_name: str,
        opening: HeaderPattern | None = None,
        start: int = 0,
    ) -> ClassText | None:
        """Return the class text, or None if the class header cannot be found.

        ``opening`` and ``start`` only matter for the first lookup of a name.
        """
        if class_name in self._entries:
            return self._entries[class_name]
        try:
            entry = extract_class(class_name, self.text, opening, start)
        except ClassNotFoundError as e:
            logger.debug(str(e))
            entry = None
        self._entries[class_name] = entry
        return entry

    def __contains__(self, class_name: str) -> bool:
        return class_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def resolve(
    pattern: HeaderPattern,
    text: str,
    lines: list[str],
    offset: int = 0,
    start: int = 0,
) -> tuple[LocationInfo, PatternMatch | None]:
    """Locate the first match of a pattern at or after start.

    Args:
        pattern: Header pattern to search for
        text: Text to search (the whole file or an isolated class)
        lines: Lines of the whole file
        offset: Offset of ``text`` within the whole file
        start: Offset within ``text`` where the search begins

    Returns:
        The location and the match, or (NOT_FOUND, None)
    """
    match = pattern.search(text, start)
    if match is None:
        return NOT_FOUND, None
    location = index_to_line(match.index + offset, lines)
    if not location.found:
        return NOT_FOUND, None
    return location, match


class SearchCursor:
    """Resume point for successive header searches over one text.

    Entities arrive in source order, so each search first resumes after the
    body of the previous match, then after its header, then from the start.
    """

    def __init__(self, text: str, offset: int = 0):
        self.text = text
        self.offset = offset
        self.after_header = 0
        self.after_body = 0

    def starts(self) -> list[int]:
        starts = []
        for start in (self.after_body, self.after_header, 0):
            if start not in starts:
                starts.append(start)
        return starts

    def advance(self, match: PatternMatch) -> None:
        self.after_header = match.end
        if match.text.endswith("{"):
            self.after_body = block_end(self.text, match.end - 1)
            return
        # Arrow functions: the body follows the "=>" of the header.
        pos = match.end
        while pos < len(self.text) and self.text[pos] in WHITESPACE:
            pos += 1
        if pos < len(self.text) and self.text[pos] == "{":
            self.after_body = block_end(self.text, pos)
        else:
            self.after_body = match.end

    def resolve(
        self,
        pattern: HeaderPattern,
        lines: list[str],
    ) -> tuple[LocationInfo, PatternMatch | None]:
        """Locate the pattern past earlier matches and move the cursor on."""
        for start in self.starts():
            location, match = resolve(pattern, self.text, lines, self.offset, start)
            if match is not None:
                self.advance(match)
                return location, match
        return NOT_FOUND, None
