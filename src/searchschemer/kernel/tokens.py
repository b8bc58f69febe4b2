"""Forward-only JSON token cursor over an ijson event stream.

The cursor buffers exactly one event of lookahead so callers can peek at the
kind of the next token before deciding how to consume it. Consumed tokens
can never be revisited.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, BinaryIO, Iterator, Optional, Tuple

import ijson

from searchschemer.errors import MalformedMappingError


class TokenKind(str, Enum):
    """Kinds of tokens the cursor can report."""
    BEGIN_OBJECT = "BEGIN_OBJECT"
    END_OBJECT = "END_OBJECT"
    BEGIN_ARRAY = "BEGIN_ARRAY"
    END_ARRAY = "END_ARRAY"
    NAME = "NAME"
    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    END_DOCUMENT = "END_DOCUMENT"


_EVENT_KINDS = {
    "start_map": TokenKind.BEGIN_OBJECT,
    "end_map": TokenKind.END_OBJECT,
    "start_array": TokenKind.BEGIN_ARRAY,
    "end_array": TokenKind.END_ARRAY,
    "map_key": TokenKind.NAME,
    "string": TokenKind.STRING,
    "number": TokenKind.NUMBER,
    "boolean": TokenKind.BOOLEAN,
    "null": TokenKind.NULL,
}

_SCALAR_TEXT_KINDS = (TokenKind.STRING, TokenKind.NUMBER, TokenKind.BOOLEAN)


def _scalar_text(kind: TokenKind, value: Any) -> str:
    if kind is TokenKind.BOOLEAN:
        return "true" if value else "false"
    return str(value)


class TokenCursor:
    """Sequential reader over the tokens of one JSON document."""

    def __init__(self, source: BinaryIO):
        self._events: Iterator[Tuple[str, Any]] = ijson.basic_parse(source, use_float=True)
        self._pending: Optional[Tuple[TokenKind, Any]] = None

    def _fill(self) -> Tuple[TokenKind, Any]:
        if self._pending is None:
            try:
                event, value = next(self._events)
            except StopIteration:
                self._pending = (TokenKind.END_DOCUMENT, None)
            except ijson.JSONError as e:
                raise MalformedMappingError(f"Invalid JSON: {e}") from e
            else:
                self._pending = (_EVENT_KINDS[event], value)
        return self._pending

    def _take(self, *expected: TokenKind) -> Any:
        kind, value = self._fill()
        if kind not in expected:
            wanted = " or ".join(k.value for k in expected)
            raise MalformedMappingError(f"Expected {wanted} but found {kind.value}")
        self._pending = None
        return value

    def peek(self) -> TokenKind:
        """Return the kind of the next token without consuming it."""
        return self._fill()[0]

    def begin_object(self) -> None:
        self._take(TokenKind.BEGIN_OBJECT)

    def end_object(self) -> None:
        self._take(TokenKind.END_OBJECT)

    def next_name(self) -> str:
        """Consume the next object key."""
        return self._take(TokenKind.NAME)

    def next_string(self) -> str:
        """Consume the next scalar value as text.

        Numbers and booleans are returned as their JSON text so that
        ``"boost": 2.0`` reads the same as ``"boost": "2.0"``.
        """
        kind = self.peek()
        value = self._take(*_SCALAR_TEXT_KINDS)
        return _scalar_text(kind, value)

    def skip_value(self) -> None:
        """Consume one complete value, including any nested structure."""
        kind = self.peek()
        if kind in (TokenKind.BEGIN_OBJECT, TokenKind.BEGIN_ARRAY):
            depth = 0
            while True:
                kind = self.peek()
                if kind is TokenKind.END_DOCUMENT:
                    raise MalformedMappingError("Unexpected end of document inside value")
                self._take(kind)
                if kind in (TokenKind.BEGIN_OBJECT, TokenKind.BEGIN_ARRAY):
                    depth += 1
                elif kind in (TokenKind.END_OBJECT, TokenKind.END_ARRAY):
                    depth -= 1
                    if depth == 0:
                        return
        self._take(*_SCALAR_TEXT_KINDS, TokenKind.NULL)

    def end_document(self) -> None:
        """Assert that the document has no content after the root value."""
        self._take(TokenKind.END_DOCUMENT)
