class ScribeError(Exception):
    """Base class for errors raised while scanning a source file."""


class JavaScriptSyntaxError(ScribeError):
    """Raised when the parser cannot build a clean tree from the source."""

    def __init__(self, line: int, column: int, detail: str = "syntax error"):
        self.line = line
        self.column = column
        self.detail = detail
        super().__init__(f"{detail} at line {line}, column {column}")


class ClassNotFoundError(ScribeError):
    """Raised when a class header cannot be found in the source text."""

    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(f"Class '{class_name}' not found in source text")
