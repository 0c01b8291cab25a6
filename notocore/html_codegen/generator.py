"""HTML renderer for MiniTeX documents.

Math is emitted with its ``$``/``$$`` delimiters in place; typesetting is
left to whatever math library the host page loads.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .utils import escape_html
from ..ast import (
    Block,
    Blockquote,
    Bold,
    Code,
    DisplayMath,
    Heading,
    Inline,
    InlineMath,
    Italic,
    Meta,
    MiniDocument,
    OrderedList,
    Paragraph,
    Text,
    UnorderedList,
)

CONTENT_PLACEHOLDER = "<!--CONTENT-->"

HEADING_CLASSES = {
    1: "section",
    2: "subsection",
    3: "subsubsection",
}

DEFAULT_SHELL = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
</head>
<body>
<div id="content">%s</div>
</body>
</html>
""" % CONTENT_PLACEHOLDER


def generate_html(doc: MiniDocument) -> str:
    """Render ``doc`` as an HTML fragment."""

    if not isinstance(doc, MiniDocument):
        raise TypeError("doc must be an instance of MiniDocument")
    parts = [_emit_meta(doc.meta)]
    parts.extend(_emit_block(block) for block in doc.blocks)
    return "".join(parts)


def generate_html_document(doc: MiniDocument, shell: Optional[str] = None) -> str:
    """Embed the rendered fragment into ``shell`` at ``<!--CONTENT-->``.

    A shell without the placeholder gets the fragment before ``</body>``,
    or appended when there is no body tag either.
    """

    body = generate_html(doc)
    shell = DEFAULT_SHELL if shell is None else shell
    if CONTENT_PLACEHOLDER in shell:
        return shell.replace(CONTENT_PLACEHOLDER, body, 1)
    idx = shell.lower().rfind("</body>")
    if idx >= 0:
        return shell[:idx] + body + shell[idx:]
    return shell + body


# ---------------------------------------------------------------------------
# Emission
# ---------------------------------------------------------------------------

def _emit_meta(meta: Meta) -> str:
    parts: List[str] = []
    if meta.title is not None:
        parts.append(f"<h1 class='title'>{escape_html(meta.title)}</h1>")
    if meta.author is not None or meta.date is not None:
        parts.append("<div class='meta'>")
        if meta.author is not None:
            parts.append(f"<div class='author'>{escape_html(meta.author)}</div>")
        if meta.date is not None:
            parts.append(f"<div class='date'>{escape_html(meta.date)}</div>")
        parts.append("</div>")
    return "".join(parts)


def _emit_items(items: Iterable[Iterable[Inline]]) -> str:
    return "".join(f"<li>{_emit_inlines(item)}</li>" for item in items)


def _emit_block(block: Block) -> str:
    if isinstance(block, Heading):
        level = max(1, min(block.level, 6))
        css = HEADING_CLASSES.get(level, "heading")
        return f"<h{level} class='{css}'>{escape_html(block.text)}</h{level}>"
    if isinstance(block, Paragraph):
        return f"<p>{_emit_inlines(block.inlines)}</p>"
    if isinstance(block, UnorderedList):
        return f"<ul>{_emit_items(block.items)}</ul>"
    if isinstance(block, OrderedList):
        return f"<ol>{_emit_items(block.items)}</ol>"
    if isinstance(block, Blockquote):
        return f"<blockquote>{_emit_inlines(block.inlines)}</blockquote>"
    if isinstance(block, DisplayMath):
        return f"<div class='display-math'>$${escape_html(block.source)}$$</div>"
    raise ValueError(f"unknown block {block!r}")


def _emit_inlines(inlines: Iterable[Inline]) -> str:
    return "".join(_emit_inline(node) for node in inlines)


def _emit_inline(node: Inline) -> str:
    if isinstance(node, Text):
        return escape_html(node.text)
    if isinstance(node, Bold):
        return f"<strong>{_emit_inlines(node.children)}</strong>"
    if isinstance(node, Italic):
        return f"<em>{_emit_inlines(node.children)}</em>"
    if isinstance(node, Code):
        return f"<code>{escape_html(node.text)}</code>"
    if isinstance(node, InlineMath):
        return f"${escape_html(node.source)}$"
    raise ValueError(f"unknown inline {node!r}")
