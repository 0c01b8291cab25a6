from .ink import Drawing, EraserPath, Ink, Rect, Stroke, StrokePoint, as_point
from .geometry import bounds_of, polyline_distance_sq, polyline_length, segment_distance_sq
from .eraser import (
    EraseOptions,
    Viewport,
    erase,
    erase_near,
    kept_runs,
    min_run_length,
    prepare_eraser_path,
)
from .ast import (
    Blockquote,
    Bold,
    Code,
    DisplayMath,
    Heading,
    InlineMath,
    Italic,
    Meta,
    MiniDocument,
    OrderedList,
    Paragraph,
    Text,
    UnorderedList,
)
from .normalize import (
    extract_meta,
    fix_command_typos,
    normalize_line_breaks,
    normalize_source,
    strip_preamble,
    wrap_bare_math,
)
from .lexer import classify_line
from .parser import parse_blocks, parse_inlines
from .html_codegen import escape_html, generate_html, generate_html_document
from .tex_export import build_tex_document
from .compiler import compile_document, render

__all__ = [
    'Drawing',
    'EraserPath',
    'Ink',
    'Rect',
    'Stroke',
    'StrokePoint',
    'as_point',
    'bounds_of',
    'polyline_distance_sq',
    'polyline_length',
    'segment_distance_sq',
    'EraseOptions',
    'Viewport',
    'erase',
    'erase_near',
    'kept_runs',
    'min_run_length',
    'prepare_eraser_path',
    'Blockquote',
    'Bold',
    'Code',
    'DisplayMath',
    'Heading',
    'InlineMath',
    'Italic',
    'Meta',
    'MiniDocument',
    'OrderedList',
    'Paragraph',
    'Text',
    'UnorderedList',
    'extract_meta',
    'fix_command_typos',
    'normalize_line_breaks',
    'normalize_source',
    'strip_preamble',
    'wrap_bare_math',
    'classify_line',
    'parse_blocks',
    'parse_inlines',
    'escape_html',
    'generate_html',
    'generate_html_document',
    'build_tex_document',
    'compile_document',
    'render',
]
