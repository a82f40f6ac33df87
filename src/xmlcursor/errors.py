"""Exceptions raised by xmlcursor."""

from typing import Optional


class XmlCursorError(Exception):
    """Base class for xmlcursor errors."""


class MalformedXmlError(XmlCursorError, ValueError):
    """Raised when the tokenizer cannot lex the input document."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[int] = None,
    ):
        super().__init__(message)
        self.line = line
        self.column = column
        self.code = code

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is not None:
            return f"{message} (line {self.line}, column {self.column})"
        return message
