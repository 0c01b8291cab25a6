import re
from typing import Tuple

LineToken = Tuple[str, str, int, int]  # (type, payload, line, level)

BLANK = 'BLANK'
DISPLAY_MATH = 'DISPLAY_MATH'
HEADING = 'HEADING'
QUOTE = 'QUOTE'
UL_ITEM = 'UL_ITEM'
OL_ITEM = 'OL_ITEM'
TEXT = 'TEXT'

LIST_KINDS = (UL_ITEM, OL_ITEM)

LATEX_HEADINGS = (
    ('\\section{', 1),
    ('\\subsection{', 2),
    ('\\subsubsection{', 3),
)
MARKDOWN_HEADINGS = (
    ('### ', 3),
    ('## ', 2),
    ('# ', 1),
)

_ol_re = re.compile(r'^\d+\.\s')


def _heading(line: str):
    body = line.rstrip()
    for prefix, level in LATEX_HEADINGS:
        if body.startswith(prefix) and body.endswith('}'):
            return level, body[len(prefix):-1]
    for prefix, level in MARKDOWN_HEADINGS:
        if line.startswith(prefix):
            return level, line[len(prefix):]
    return None


def classify_line(line: str, line_no: int = 0) -> LineToken:
    """Classify one source line for the block scanner.

    Display-math openers keep everything after the leading ``$$`` as
    payload; list items and quotes drop their marker.
    """
    stripped = line.strip()
    if not stripped:
        return (BLANK, '', line_no, 0)
    if stripped.startswith('$$'):
        return (DISPLAY_MATH, stripped[2:], line_no, 0)
    heading = _heading(line)
    if heading is not None:
        level, text = heading
        return (HEADING, text, line_no, level)
    if line.startswith('> '):
        return (QUOTE, line[2:], line_no, 0)
    if line.startswith('- '):
        return (UL_ITEM, line[2:], line_no, 0)
    m = _ol_re.match(line)
    if m:
        return (OL_ITEM, line[m.end():], line_no, 0)
    return (TEXT, line, line_no, 0)
