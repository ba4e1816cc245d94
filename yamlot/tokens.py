"""Tokenizer for a small subset of YAML block syntax."""

from __future__ import annotations

import codecs
import io
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import IO, Iterator, Union

_CHUNK_SIZE = 4096


class TokenType(Enum):
    """Kinds of tokens produced by the tokenizer."""

    EOF = "EOF"
    ERROR = "ERROR"
    DASH = "DASH"
    PLAIN_SCALAR = "PLAIN-SCALAR"
    NEWLINE = "NEWLINE"
    DOC_START = "DOC-START"
    DOC_END = "DOC-END"
    INDENT = "INDENT"
    DEDENT = "DEDENT"


@dataclass(frozen=True)
class Token:
    """A single token with its position in the input."""

    type: TokenType
    value: str = ""
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        if self.type is TokenType.PLAIN_SCALAR:
            return f"{self.type.value}({self.value})"
        return self.type.value

    def matches(self, other: Token) -> bool:
        """Compare by type, and by value for plain scalars."""
        return tokens_equal(self, other)


def tokens_equal(first: Token, second: Token) -> bool:
    """Tokens are equal when types match and, for plain scalars, values match."""
    if first.type is not second.type:
        return False
    if first.type is TokenType.PLAIN_SCALAR:
        return first.value == second.value
    return True


class _Status(Enum):
    BLANK = "StatusBlank"
    ONE_DOT = "StatusOneDot"
    TWO_DOTS = "StatusTwoDots"
    THREE_DOTS = "StatusThreeDots"
    ONE_DASH = "StatusOneDash"
    TWO_DASHES = "StatusTwoDashes"
    THREE_DASHES = "StatusThreeDashes"
    AFTER_DASH = "StatusAfterDash"
    SCALAR = "StatusScalar"


class _CharSource:
    """Character reader over a text or binary stream with peek and one-step unread."""

    def __init__(self, stream: IO) -> None:
        self._stream = stream
        self._decoder = None
        self._buffer = ""
        self._pos = 0
        self._eof = False

    def _fill(self) -> bool:
        while self._pos >= len(self._buffer) and not self._eof:
            chunk = self._stream.read(_CHUNK_SIZE)
            if isinstance(chunk, (bytes, bytearray)):
                if self._decoder is None:
                    self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
                text = self._decoder.decode(bytes(chunk), final=not chunk)
            else:
                text = chunk or ""
            if not chunk:
                self._eof = True
            keep = self._buffer[self._pos - 1:self._pos] if self._pos else ""
            self._buffer = keep + text
            self._pos = len(keep)
        return self._pos < len(self._buffer)

    def peek(self) -> str | None:
        return self._buffer[self._pos] if self._fill() else None

    def read(self) -> str | None:
        if not self._fill():
            return None
        ch = self._buffer[self._pos]
        self._pos += 1
        return ch

    def unread(self) -> None:
        self._pos -= 1


class Tokenizer:
    """Turns a character stream into YAML tokens, one call at a time."""

    def __init__(self, stream: Union[IO, str], debug: bool = False) -> None:
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        self._source = _CharSource(stream)
        self._line = 1
        self._column = 0
        self._status = _Status.BLANK
        self._debug = debug
        self._indents = [0]
        self._pending: deque[Token] = deque()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, the end-of-input token."""
        while True:
            item = self.next_token()
            if item.type is TokenType.EOF:
                return
            yield item

    def next_token(self) -> Token:
        """Return the next token; an EOF token marks the end of the input."""
        while True:
            if self._pending:
                return self._pending.popleft()
            ch = self._read_char("NextToken")
            if ch is None:
                self._flush_at_eof()
                continue
            result = self._step(ch)
            if result is not None:
                return result

    def _push(self, item: Token) -> None:
        if self._debug:
            print(f"tokenBufferPush: {item} at line {item.line}, column {item.column}")
        self._pending.append(item)

    def _read_char(self, caller: str) -> str | None:
        ch = self._source.read()
        if self._debug:
            code = 0 if ch is None else ord(ch)
            err = "EOF" if ch is None else "<nil>"
            print(f"{caller}: {self._status.value}: readRune: {code}, err: {err}")
        if ch is not None:
            self._column += 1
        return ch

    def _unread(self) -> None:
        self._source.unread()
        self._column -= 1

    def _make(self, kind: TokenType, value: str = "", back: int = 0) -> Token:
        return Token(kind, value, self._line, self._column - back)

    def _newline(self) -> Token:
        escaped = "\\n"
        result = self._make(TokenType.NEWLINE, escaped)
        self._line += 1
        self._column = 0
        return result

    def _collect_scalar(self, start: str) -> Token:
        parts = [start]
        while True:
            peek = self._source.peek()
            if peek is None or peek in "\n#":
                break
            parts.append(self._read_char("collectPlainScalar"))
        value = "".join(parts)
        return self._make(TokenType.PLAIN_SCALAR, value, len(value.encode("utf-8")))

    def _check_indent(self) -> None:
        previous = self._indents[-1]
        current = self._column - 1
        if current > previous:
            self._indents.append(current)
            self._push(self._make(TokenType.INDENT))
        elif current < previous:
            while len(self._indents) > 1 and current < self._indents[-1]:
                self._indents.pop()
                self._push(self._make(TokenType.DEDENT))
            if current != self._indents[-1]:
                self._push(self._make(
                    TokenType.ERROR,
                    f"IndentationError: inconsistent dedent from level {previous} to {current}",
                ))

    def _flush_at_eof(self) -> None:
        pending = {
            _Status.ONE_DASH: (TokenType.DASH, "-"),
            _Status.TWO_DASHES: (TokenType.PLAIN_SCALAR, "--"),
            _Status.THREE_DASHES: (TokenType.DOC_START, "---"),
            _Status.ONE_DOT: (TokenType.PLAIN_SCALAR, "."),
            _Status.TWO_DOTS: (TokenType.PLAIN_SCALAR, ".."),
            _Status.THREE_DOTS: (TokenType.DOC_END, "..."),
        }.get(self._status)
        if pending is not None:
            kind, text = pending
            self._push(self._make(kind, text, len(text)))
        while len(self._indents) > 1:
            self._indents.pop()
            self._push(self._make(TokenType.DEDENT))
        self._push(self._make(TokenType.EOF))

    def _step(self, ch: str) -> Token | None:
        status = self._status

        if status is _Status.BLANK:
            if ch == " ":
                return None
            if ch == "\n":
                return self._newline()
            if ch == "-" and self._column == 1:
                self._status = _Status.ONE_DASH
                return None
            if ch == "." and self._column == 1:
                self._status = _Status.ONE_DOT
                return None
            self._check_indent()
            self._push(self._collect_scalar(ch))
            return None

        if status in (_Status.ONE_DOT, _Status.TWO_DOTS):
            prefix = "." if status is _Status.ONE_DOT else ".."
            if ch == ".":
                self._status = _Status.TWO_DOTS if status is _Status.ONE_DOT else _Status.THREE_DOTS
                return None
            if ch == "\n":
                self._status = _Status.BLANK
                self._unread()
                return self._make(TokenType.PLAIN_SCALAR, prefix, len(prefix))
            self._status = _Status.SCALAR
            return self._collect_scalar(prefix + ch)

        if status is _Status.THREE_DOTS:
            if ch == " ":
                self._status = _Status.SCALAR
                return self._make(TokenType.DOC_END, "...", 3)
            if ch == "\n":
                self._status = _Status.BLANK
                self._unread()
                return self._make(TokenType.DOC_END, "...", 3)
            self._status = _Status.SCALAR
            return self._collect_scalar("..." + ch)

        if status is _Status.ONE_DASH:
            if ch == " ":
                self._status = _Status.SCALAR
                return self._make(TokenType.DASH, "-")
            if ch == "\t":
                self._status = _Status.AFTER_DASH
                self._unread()
                return self._make(TokenType.DASH, "-")
            if ch == "\n":
                self._status = _Status.BLANK
                self._unread()
                return self._make(TokenType.DASH, "-")
            if ch == "-":
                self._status = _Status.TWO_DASHES
                return None
            self._status = _Status.BLANK
            return self._collect_scalar("-" + ch)

        if status is _Status.TWO_DASHES:
            if ch == " ":
                self._status = _Status.BLANK
                return self._make(TokenType.PLAIN_SCALAR, "--", 2)
            if ch == "\n":
                self._status = _Status.BLANK
                self._unread()
                return self._make(TokenType.PLAIN_SCALAR, "--", 2)
            if ch == "-":
                self._status = _Status.THREE_DASHES
                return None
            self._status = _Status.BLANK
            return self._collect_scalar("--" + ch)

        if status is _Status.THREE_DASHES:
            if ch == " ":
                self._status = _Status.SCALAR
                return self._make(TokenType.DOC_START, "---", 3)
            if ch == "\n":
                self._status = _Status.BLANK
                self._unread()
                return self._make(TokenType.DOC_START, "---", 3)
            self._status = _Status.BLANK
            return self._collect_scalar("---" + ch)

        if status is _Status.AFTER_DASH:
            self._status = _Status.BLANK
            while ch == " ":
                ch = self._read_char("NextToken: statusAfterDash")
                if ch is None:
                    return self._make(TokenType.EOF)
            if ch == "\n":
                return self._newline()
            return self._collect_scalar(ch)

        # _Status.SCALAR
        self._status = _Status.BLANK
        if ch == "\n":
            self._unread()
            return self._collect_scalar("")
        return self._collect_scalar(ch)


def tokenize(stream: Union[IO, str], debug: bool = False) -> Iterator[Token]:
    """Yield all tokens of the stream, excluding the final end-of-input token."""
    yield from Tokenizer(stream, debug)