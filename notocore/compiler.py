"""MiniTeX facade: source text in, HTML fragment out."""

from __future__ import annotations

import logging

from .ast import MiniDocument
from .html_codegen import generate_html
from .logging_utils import debug_log_call
from .normalize import extract_meta, normalize_source
from .parser import parse_blocks

logger = logging.getLogger(__name__)


@debug_log_call(logger)
def compile_document(source: str) -> MiniDocument:
    text = normalize_source(source)
    meta, lines = extract_meta(text.split("\n"))
    blocks = parse_blocks(lines)
    logger.debug("compiled %d block(s) from %d line(s)", len(blocks), len(lines))
    return MiniDocument(meta=meta, blocks=blocks)


@debug_log_call(logger, log_result=False)
def render(source: str) -> str:
    """Compile mixed Markdown/LaTeX note text to an HTML fragment.

    Never raises for any input string; unterminated constructs run to the
    end of their line or of the input.
    """
    return generate_html(compile_document(source))
