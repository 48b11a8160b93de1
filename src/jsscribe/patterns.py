"""Token patterns that find an entity's header in raw source text.

A pattern is a fixed sequence of literal tokens. Between two tokens only
whitespace may vary (spaces, tabs and newlines), so the pattern pins down where
a construct's header starts without modelling anything else about it. Matching
walks the text once per candidate start offset and never backtracks.
"""

import logging
from dataclasses import dataclass, field
from typing import NamedTuple

from jsscribe.discovery import node_text
from jsscribe.models import DocumentableEntity

logger = logging.getLogger(__name__)

WHITESPACE = " \t\n"

# Gap rules placed in front of a token.
NONE = 0
ANY = 1
MANY = 2


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char in "_$"


@dataclass(frozen=True)
class PatternMatch:
    """A successful search: match start, end (exclusive) and matched text."""
    index: int
    end: int
    text: str


class Token(NamedTuple):
    gap: int
    literal: str
    optional: bool = False


def normalize_text(source_code: str, tab_size: int = 0) -> str:
    """Drop carriage returns and optionally expand tabs to spaces."""
    text = source_code.replace("\r", "")
    if tab_size > 0:
        text = text.replace("\t", " " * tab_size)
    return text


@dataclass
class HeaderPattern:
    """A sequence of literal tokens with flexible whitespace between them."""
    tokens: list[Token] = field(default_factory=list)

    def then(self, literal: str, gap: int = ANY, optional: bool = False) -> "HeaderPattern":
        """Append a literal token preceded by the given gap rule.

        An optional token is consumed when it is present and skipped otherwise.
        """
        if not self.tokens:
            gap = NONE
            optional = False
        self.tokens.append(Token(gap, literal, optional))
        return self

    def normalized(self, tab_size: int = 0) -> "HeaderPattern":
        """Copy with every literal normalized like the text it is searched in."""
        return HeaderPattern([
            token._replace(literal=normalize_text(token.literal, tab_size))
            for token in self.tokens
        ])

    def _match_token(self, text: str, pos: int, token: Token) -> int:
        start = pos
        if token.gap != NONE:
            while pos < len(text) and text[pos] in WHITESPACE:
                pos += 1
        if token.gap == MANY and pos == start:
            return -1
        if not text.startswith(token.literal, pos):
            return -1
        pos += len(token.literal)
        if _is_word_char(token.literal[-1]) and pos < len(text) and _is_word_char(text[pos]):
            return -1
        return pos

    def match_at(self, text: str, start: int) -> int:
        """Return the end offset of a match starting exactly at start, or -1."""
        if not self.tokens:
            return -1
        first = self.tokens[0].literal
        if _is_word_char(first[0]) and start > 0 and _is_word_char(text[start - 1]):
            return -1

        pos = start
        for token in self.tokens:
            end = self._match_token(text, pos, token)
            if end == -1:
                if token.optional:
                    continue
                return -1
            pos = end
        return pos

    def search(self, text: str, start: int = 0) -> PatternMatch | None:
        """Find the first match at or after start."""
        if not self.tokens:
            return None
        first = self.tokens[0].literal
        index = text.find(first, start)
        while index != -1:
            end = self.match_at(text, index)
            if end != -1:
                return PatternMatch(index=index, end=end, text=text[index:end])
            index = text.find(first, index + 1)
        return None

    def __str__(self) -> str:
        parts = []
        for token in self.tokens:
            part = {NONE: "", ANY: "~", MANY: "+"}[token.gap] + token.literal
            parts.append(part + "?" if token.optional else part)
        return " ".join(parts)


class UnsupportedParameterError(ValueError):
    """Raised for parameters a header pattern cannot describe by name alone."""


def _has_token(node, token: str) -> bool:
    return any(child.type == token for child in node.children)


def _modifier_tokens(node) -> list[str]:
    """Anonymous modifier tokens (static, async, get, set, *) before the name."""
    name = node.child_by_field_name("name")
    tokens = []
    for child in node.children:
        if name is not None and child.start_byte >= name.start_byte:
            break
        if not child.is_named:
            tokens.append(child.type)
    return tokens


def parameter_names(params_node) -> list[str]:
    """Return the plain names of a formal parameter list.

    Raises:
        UnsupportedParameterError: For defaults, destructuring or rest parameters
    """
    if params_node is None:
        return []
    if params_node.type == "identifier":
        return [node_text(params_node)]

    names = []
    for child in params_node.named_children:
        if child.type == "comment":
            continue
        if child.type != "identifier":
            raise UnsupportedParameterError(
                f"Parameter '{node_text(child)}' is not a plain identifier"
            )
        names.append(node_text(child))
    return names


def function_parameters(function_node) -> list[str]:
    """Parameter names of a function, arrow function or method node."""
    params = function_node.child_by_field_name("parameters")
    if params is None:
        params = function_node.child_by_field_name("parameter")
    return parameter_names(params)


def method_parameters(method_node) -> list[str]:
    """Getters take no parameters and setters exactly one."""
    modifiers = _modifier_tokens(method_node)
    if "get" in modifiers:
        return []
    names = function_parameters(method_node)
    if "set" in modifiers:
        return names[:1]
    return names


def entity_parameters(entity: DocumentableEntity) -> list[str] | None:
    """Parameter names reported for an entity (None for classes)."""
    if entity.kind == "class":
        return None
    if entity.kind == "variable":
        return function_parameters(entity.node.child_by_field_name("value"))
    if entity.kind == "method":
        return method_parameters(entity.node)
    return function_parameters(entity.node)


def _add_parameter_list(pattern: HeaderPattern, names: list[str]) -> None:
    pattern.then("(")
    for i, name in enumerate(names):
        pattern.then(name)
        if i != len(names) - 1:
            pattern.then(",")
    if names:
        pattern.then(",", optional=True)
    pattern.then(")")


def _function_pattern(node) -> HeaderPattern:
    pattern = HeaderPattern()
    if _has_token(node, "async"):
        pattern.then("async")
        pattern.then("function", MANY)
    else:
        pattern.then("function")

    name = node_text(node.child_by_field_name("name"))
    if _has_token(node, "*"):
        pattern.then("*")
        pattern.then(name)
    else:
        pattern.then(name, MANY)
    _add_parameter_list(pattern, function_parameters(node))
    return pattern.then("{")


def _variable_pattern(node) -> HeaderPattern:
    value = node.child_by_field_name("value")
    pattern = HeaderPattern()
    pattern.then(node_text(node.child_by_field_name("name")))
    pattern.then("=")
    is_async = _has_token(value, "async")
    if is_async:
        pattern.then("async")

    if value.type == "arrow_function":
        single = value.child_by_field_name("parameter")
        if single is not None:
            pattern.then(node_text(single), MANY if is_async else ANY)
        else:
            _add_parameter_list(pattern, function_parameters(value))
        return pattern.then("=>")

    generator = _has_token(value, "*")
    pattern.then("function", MANY if is_async else ANY)
    if generator:
        pattern.then("*")
    name = value.child_by_field_name("name")
    if name is not None:
        pattern.then(node_text(name), ANY if generator else MANY)
    _add_parameter_list(pattern, function_parameters(value))
    return pattern.then("{")


def _class_pattern(node) -> HeaderPattern:
    pattern = HeaderPattern()
    pattern.then("class")
    pattern.then(node_text(node.child_by_field_name("name")), MANY)
    heritage = next(
        (child for child in node.named_children if child.type == "class_heritage"),
        None,
    )
    if heritage is not None and heritage.named_children:
        pattern.then("extends", MANY)
        pattern.then(node_text(heritage.named_children[0]), MANY)
    return pattern.then("{")


def _method_pattern(node) -> HeaderPattern:
    pattern = HeaderPattern()
    previous = None
    for modifier in _modifier_tokens(node):
        pattern.then(modifier, ANY if "*" in (previous, modifier) else MANY)
        previous = modifier
    pattern.then(
        node_text(node.child_by_field_name("name")),
        ANY if previous in (None, "*") else MANY,
    )
    _add_parameter_list(pattern, method_parameters(node))
    return pattern.then("{")


def build_pattern(entity: DocumentableEntity, tab_size: int = 0) -> HeaderPattern | None:
    """Build a pattern that finds the entity's literal header in source text.

    Args:
        entity: A discovered entity
        tab_size: Tab expansion applied to the text the pattern will search

    Returns:
        The pattern, or None when the header cannot be described by names
        alone (default values, destructuring or rest parameters)
    """
    builders = {
        "function": _function_pattern,
        "variable": _variable_pattern,
        "class": _class_pattern,
        "method": _method_pattern,
    }
    try:
        return builders[entity.kind](entity.node).normalized(tab_size)
    except UnsupportedParameterError as e:
        logger.debug(f"No header pattern for {entity.kind}: {e}")
        return None
