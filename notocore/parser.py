from typing import List, Optional, Sequence, Tuple, Union

from .ast import (
    Block,
    Blockquote,
    Bold,
    Code,
    DisplayMath,
    Heading,
    Inline,
    InlineMath,
    Italic,
    OrderedList,
    Paragraph,
    Text,
    UnorderedList,
)
from .lexer import (
    BLANK,
    DISPLAY_MATH,
    HEADING,
    LIST_KINDS,
    OL_ITEM,
    QUOTE,
    TEXT,
    classify_line,
)

# Longest names first so \textbf is not read as \text + "bf".
BRACE_COMMANDS = (
    ('\\textbf', 'bold'),
    ('\\textit', 'italic'),
    ('\\title', 'text'),
    ('\\text', 'text'),
)


class Cursor:
    def __init__(self, text: str):
        self.text = text
        self.i = 0

    def at_end(self) -> bool:
        return self.i >= len(self.text)

    def peek(self, offset: int = 0) -> Optional[str]:
        idx = self.i + offset
        return self.text[idx] if idx < len(self.text) else None

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.i)

    def advance(self, count: int = 1) -> None:
        self.i = min(self.i + count, len(self.text))

    def skip_whitespace(self) -> None:
        while not self.at_end() and self.text[self.i].isspace():
            self.i += 1

    def take_until(self, delim: str) -> str:
        """Consume up to and including ``delim``; unterminated runs to the end."""
        end = self.text.find(delim, self.i)
        if end < 0:
            chunk = self.text[self.i:]
            self.i = len(self.text)
            return chunk
        chunk = self.text[self.i:end]
        self.i = end + len(delim)
        return chunk

    def take_braced(self) -> str:
        """Consume a ``{...}`` group, cursor on the opening brace.

        Nested braces are tracked with a depth counter; an unbalanced group
        runs to the end of the text.
        """
        self.advance()
        out: List[str] = []
        depth = 1
        while not self.at_end():
            ch = self.text[self.i]
            self.i += 1
            if ch == '{':
                depth += 1
            elif ch == '}':
                depth -= 1
                if depth == 0:
                    break
            out.append(ch)
        return ''.join(out)


def _parse_command(cur: Cursor) -> Union[Inline, str, None]:
    """Parse a brace command at the cursor.

    Returns the node, the bare command name when no ``{`` follows, or None
    when the backslash does not start a known command.
    """
    for name, kind in BRACE_COMMANDS:
        if not cur.startswith(name):
            continue
        cur.advance(len(name))
        after_name = cur.i
        cur.skip_whitespace()
        if cur.peek() != '{':
            cur.i = after_name
            return name
        inner = cur.take_braced()
        if kind == 'bold':
            return Bold(parse_inlines(inner))
        if kind == 'italic':
            return Italic(parse_inlines(inner))
        return Text(inner)
    return None


def parse_inlines(text: str) -> Tuple[Inline, ...]:
    cur = Cursor(text)
    out: List[Inline] = []
    buf: List[str] = []

    def flush() -> None:
        if buf:
            out.append(Text(''.join(buf)))
            buf.clear()

    while not cur.at_end():
        ch = cur.peek()
        if ch == '`':
            flush()
            cur.advance()
            out.append(Code(cur.take_until('`')))
            continue
        if cur.startswith('**'):
            flush()
            cur.advance(2)
            out.append(Bold(parse_inlines(cur.take_until('**'))))
            continue
        if ch == '*':
            flush()
            cur.advance()
            out.append(Italic(parse_inlines(cur.take_until('*'))))
            continue
        if ch == '$':
            flush()
            cur.advance()
            out.append(InlineMath(cur.take_until('$')))
            continue
        if ch == '\\':
            node = _parse_command(cur)
            if isinstance(node, str):
                buf.append(node)
                continue
            if node is not None:
                flush()
                out.append(node)
                continue
        buf.append(ch)
        cur.advance()
    flush()
    return tuple(out)


def _parse_display_math(lines: Sequence[str], start: int, opener: str) -> Tuple[DisplayMath, int]:
    if opener.endswith('$$'):
        return DisplayMath(opener[:-2].strip()), start + 1
    acc = opener + '\n'
    j = start + 1
    while j < len(lines) and not lines[j].strip().endswith('$$'):
        acc += lines[j] + '\n'
        j += 1
    if j < len(lines):
        acc += lines[j].strip()[:-2]
        j += 1
    return DisplayMath(acc), j


def parse_blocks(lines: Sequence[str]) -> Tuple[Block, ...]:
    blocks: List[Block] = []
    i = 0
    while i < len(lines):
        kind, payload, _, level = classify_line(lines[i], i + 1)

        if kind == BLANK:
            i += 1
            continue

        if kind == DISPLAY_MATH:
            block, i = _parse_display_math(lines, i, payload)
            blocks.append(block)
            continue

        if kind == HEADING:
            blocks.append(Heading(level, payload))
            i += 1
            continue

        if kind == QUOTE:
            blocks.append(Blockquote(parse_inlines(payload)))
            i += 1
            continue

        if kind in LIST_KINDS:
            items = []
            while i < len(lines):
                item_kind, item_text, _, _ = classify_line(lines[i], i + 1)
                if item_kind != kind:
                    break
                items.append(parse_inlines(item_text))
                i += 1
            blocks.append(OrderedList(tuple(items)) if kind == OL_ITEM else UnorderedList(tuple(items)))
            continue

        para = [lines[i]]
        i += 1
        while i < len(lines) and classify_line(lines[i], i + 1)[0] == TEXT:
            para.append(lines[i])
            i += 1
        blocks.append(Paragraph(parse_inlines(' '.join(para))))

    return tuple(blocks)
