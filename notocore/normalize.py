"""Source clean-up applied before block parsing.

Handwriting OCR and phone keyboards produce a few recurring defects:
slash-like characters where a backslash was meant, LaTeX hard breaks in
prose, and formulas typed without ``$`` delimiters. The passes here fix
those up in a fixed order and are pure string-to-string functions.
"""

import re
from typing import List, Sequence, Tuple

from .ast import Meta

LATEX_COMMANDS = (
    'int', 'sum', 'prod', 'lim', 'sqrt', 'frac', 'sin', 'cos', 'tan', 'log', 'ln',
    'cdot', 'times', 'to', 'le', 'ge', 'ne', 'neq', 'infty', 'alpha', 'beta',
    'gamma', 'pi', 'partial', 'nabla', 'pm', 'mp', 'cup', 'cap', 'subset',
    'supset', 'approx', 'sim', 'equiv', 'forall', 'exists', 'left', 'right',
    'rightarrow', 'Rightarrow', 'ldots', 'dots', 'vec', 'hat', 'bar', 'overline',
    'underline', 'mathbb', 'mathcal', 'mathrm', 'mathbf', 'text',
)

# / ∕ ／ ⁄ ¥ ￥
SLASH_LIKE = '/\u2215\uff0f\u2044\u00a5\uffe5'

META_KEYS = ('title', 'author', 'date')

_typo_re = re.compile(
    r'(?<![\\' + SLASH_LIKE + r'])[' + SLASH_LIKE + r']\s*(' + '|'.join(LATEX_COMMANDS) + r')'
)
_preamble_re = re.compile(
    r'\\documentclass(?:\[[^\]]*\])?\{.*?\}'
    r'|\\usepackage(?:\[[^\]]*\])?\{.*?\}'
    r'|\\begin\{document\}'
    r'|\\end\{document\}'
)
_escaped_newline_re = re.compile(r'\\\n')

BARE_MATH_PATTERNS = (
    re.compile(r'^[A-Za-z]\s*=\s*[A-Za-z0-9]'),
    re.compile(r'\\frac\{'),
    re.compile(r'\\int'),
    re.compile(r'\\sum'),
    re.compile(r'\\lim'),
    re.compile(r'\\sqrt'),
    re.compile(r'^[A-Za-z]\s*=\s*\\'),
    re.compile(r'^[A-Za-z]\s*=\s*-\s*[A-Za-z]'),
)

_NO_WRAP_PREFIXES = ('$', '\\text{')


def fix_command_typos(source: str) -> str:
    """Turn ``/frac``, ``¥int`` and friends into real backslash commands."""
    return _typo_re.sub(lambda m: '\\' + m.group(1), source)


def strip_preamble(source: str) -> str:
    return _preamble_re.sub('', source).strip()


def normalize_line_breaks(source: str) -> str:
    """Turn ``\\\\`` and backslash-newline hard breaks into paragraph breaks."""
    text = source.replace('\\\\', '\n\n')
    return _escaped_newline_re.sub('\n\n', text)


def _looks_like_math(stripped: str) -> bool:
    return any(p.search(stripped) for p in BARE_MATH_PATTERNS)


def wrap_bare_math(source: str) -> str:
    """Wrap lines that look like formulas in ``$...$``.

    Lines already starting with ``$`` or ``\\text{`` are left alone, as are
    the interior lines of a multi-line ``$$`` block. Indentation is kept.
    """
    out: List[str] = []
    in_display = False
    for line in source.split('\n'):
        stripped = line.strip()
        if in_display:
            out.append(line)
            if stripped.endswith('$$'):
                in_display = False
            continue
        if stripped.startswith('$$'):
            out.append(line)
            in_display = not stripped[2:].endswith('$$')
            continue
        if stripped and not stripped.startswith(_NO_WRAP_PREFIXES) and _looks_like_math(stripped):
            indent = line[:len(line) - len(line.lstrip())]
            out.append(indent + '$' + stripped + '$')
            continue
        out.append(line)
    return '\n'.join(out)


def normalize_source(source: str) -> str:
    text = source.replace('\r\n', '\n').replace('\r', '\n')
    text = fix_command_typos(text)
    text = strip_preamble(text)
    text = normalize_line_breaks(text)
    return wrap_bare_math(text)


def extract_meta(lines: Sequence[str]) -> Tuple[Meta, List[str]]:
    """Pull ``\\title{..}``, ``\\author{..}`` and ``\\date{..}`` lines out of the body.

    Only the first line per key is taken; indentation is allowed.
    """
    body = list(lines)
    found = {}
    for key in META_KEYS:
        prefix = '\\%s{' % key
        for idx, line in enumerate(body):
            stripped = line.strip()
            if stripped.startswith(prefix) and stripped.endswith('}'):
                found[key] = stripped[len(prefix):-1]
                del body[idx]
                break
    return Meta(**found), body
