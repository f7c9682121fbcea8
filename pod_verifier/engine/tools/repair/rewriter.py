# Path: pod_verifier/engine/tools/repair/rewriter.py
"""
Structural Rewriter

Rewrites "almost JSON" into JSON text one token at a time.

Unlike the detection patterns, the scanner knows where strings begin
and end, so nothing inside a string literal is ever changed. Only the
syntax between values is rewritten:

- single-quoted strings become double-quoted
- ""word"" tokens become "word"
- unquoted object keys and bare words are quoted
- True/False/None become true/false/null
- // and /* */ comments are dropped
- ... ellipses are dropped
- repeated, leading and trailing commas are dropped
- a missing comma between two values is inserted
- raw control characters inside strings are escaped
- unterminated strings and unclosed brackets are closed at the end

DESIGN: Stateless tool. Scan state lives in a _Scan object created per
call. The output is not guaranteed to parse; callers must check.
"""

import json
from typing import Optional

from ...constants.patterns import (
    BAREWORD_LITERALS,
    DOUBLE_QUOTED_STRING,
    IDENTIFIER_START,
    IDENTIFIER_BODY,
    NUMBER_TOKEN,
    ELLIPSIS_TOKEN,
)


BRACKET_PAIRS = {'{': '}', '[': ']'}
CONTROL_ESCAPES = {'\n': '\\n', '\r': '\\r', '\t': '\\t', '\b': '\\b', '\f': '\\f'}

# Characters that end a complete value in the output
VALUE_END_CHARS = frozenset('"}]')


class _Scan:
    """Mutable scan state for a single rewrite."""

    def __init__(self, text: str):
        self.text = text
        self.length = len(text)
        self.pos = 0
        self.out: list[str] = []
        self.stack: list[str] = []

    # --------------------------------------------------------------------------
    # Output helpers
    # --------------------------------------------------------------------------

    def last_char(self) -> str:
        """Last non-whitespace character written so far ('' if none)."""
        for piece in reversed(self.out):
            stripped = piece.rstrip()
            if stripped:
                return stripped[-1]
        return ''

    def drop_trailing_comma(self) -> None:
        """Remove a comma that is the last significant output piece."""
        for index in range(len(self.out) - 1, -1, -1):
            if not self.out[index].strip():
                continue
            if self.out[index] == ',':
                del self.out[index]
            return

    def separate_value(self) -> None:
        """Insert a comma when a new value directly follows a complete one."""
        if not self.stack:
            return
        last = self.last_char()
        if last in VALUE_END_CHARS or last.isalnum():
            self.out.append(',')

    def next_significant(self, start: int) -> Optional[str]:
        """First non-whitespace character at or after start."""
        index = start
        while index < self.length and self.text[index].isspace():
            index += 1
        return self.text[index] if index < self.length else None

    # --------------------------------------------------------------------------
    # Token readers
    # --------------------------------------------------------------------------

    def read_double_quoted(self) -> None:
        self.separate_value()
        doubled = DOUBLE_QUOTED_STRING.match(self.text, self.pos)
        if doubled:
            self.out.append(json.dumps(doubled.group(1), ensure_ascii=False))
            self.pos = doubled.end()
            return

        chars = ['"']
        index = self.pos + 1
        while index < self.length:
            ch = self.text[index]
            if ch == '\\' and index + 1 < self.length:
                chars.append(self.text[index:index + 2])
                index += 2
                continue
            if ch == '"':
                break
            chars.append(CONTROL_ESCAPES.get(ch, ch))
            index += 1
        chars.append('"')
        self.out.append(''.join(chars))
        self.pos = index + 1

    def read_single_quoted(self) -> None:
        self.separate_value()
        chars = ['"']
        index = self.pos + 1
        while index < self.length:
            ch = self.text[index]
            if ch == '\\' and index + 1 < self.length:
                escaped = self.text[index + 1]
                chars.append("'" if escaped == "'" else self.text[index:index + 2])
                index += 2
                continue
            if ch == "'":
                break
            if ch == '"':
                chars.append('\\"')
            else:
                chars.append(CONTROL_ESCAPES.get(ch, ch))
            index += 1
        chars.append('"')
        self.out.append(''.join(chars))
        self.pos = index + 1

    def read_word(self) -> None:
        body = IDENTIFIER_BODY.match(self.text, self.pos + 1)
        end = body.end()
        word = self.text[self.pos:end]
        self.pos = end

        self.separate_value()
        if self.next_significant(end) == ':':
            self.out.append(json.dumps(word))
        elif word in BAREWORD_LITERALS:
            self.out.append(BAREWORD_LITERALS[word])
        else:
            self.out.append(json.dumps(word))

    def read_number(self) -> bool:
        match = NUMBER_TOKEN.match(self.text, self.pos)
        if match is None:
            return False
        token = match.group(0)
        negative = token.startswith('-')
        digits = token[1:] if negative else token
        if digits.startswith('.'):
            digits = '0' + digits
        if digits.endswith('.'):
            digits = digits + '0'
        self.separate_value()
        self.out.append(('-' if negative else '') + digits)
        self.pos = match.end()
        return True

    def skip_line_comment(self) -> None:
        newline = self.text.find('\n', self.pos)
        self.pos = self.length if newline < 0 else newline

    def skip_block_comment(self) -> None:
        end = self.text.find('*/', self.pos + 2)
        self.pos = self.length if end < 0 else end + 2

    def open_bracket(self, ch: str) -> None:
        self.separate_value()
        self.out.append(ch)
        self.stack.append(ch)
        self.pos += 1

    def close_bracket(self) -> None:
        self.pos += 1
        if not self.stack:
            # Stray closer with nothing open
            return
        self.drop_trailing_comma()
        self.out.append(BRACKET_PAIRS[self.stack.pop()])

    def comma(self) -> None:
        self.pos += 1
        if self.last_char() in ('', ',', '{', '['):
            return
        self.out.append(',')


class StructuralRewriter:
    """
    Rewrites malformed record text into JSON text.

    Deterministic: identical input always yields identical output.

    Usage:
        rewriter = StructuralRewriter()
        rewriter.rewrite("{name: 'Joe', active: True,}")
        # -> '{"name": "Joe", "active": true}'
    """

    def rewrite(self, text: str) -> str:
        """
        Rewrite text token by token.

        Args:
            text: Malformed text

        Returns:
            Rewritten text (may still be invalid JSON)
        """
        scan = _Scan(text)

        while scan.pos < scan.length:
            ch = text[scan.pos]

            if ch.isspace():
                scan.out.append(ch)
                scan.pos += 1
            elif ch == '"':
                scan.read_double_quoted()
            elif ch == "'":
                scan.read_single_quoted()
            elif text.startswith('//', scan.pos):
                scan.skip_line_comment()
            elif text.startswith('/*', scan.pos):
                scan.skip_block_comment()
            elif text.startswith(ELLIPSIS_TOKEN, scan.pos):
                scan.pos += len(ELLIPSIS_TOKEN)
            elif ch in BRACKET_PAIRS:
                scan.open_bracket(ch)
            elif ch in '}]':
                scan.close_bracket()
            elif ch == ',':
                scan.comma()
            elif IDENTIFIER_START.match(ch):
                scan.read_word()
            elif ch in '-.0123456789' and scan.read_number():
                continue
            else:
                scan.out.append(ch)
                scan.pos += 1

        while scan.stack:
            scan.drop_trailing_comma()
            scan.out.append(BRACKET_PAIRS[scan.stack.pop()])

        return ''.join(scan.out).strip()


__all__ = ['StructuralRewriter']
