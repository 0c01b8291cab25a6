_HTML_ESCAPES = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
)


def escape_html(s: str) -> str:
    """Escape ``&``, ``<`` and ``>``.

    Quotes, backslashes, braces and ``$`` pass through so math source
    reaches the typesetter unchanged.
    """
    for raw, entity in _HTML_ESCAPES:
        s = s.replace(raw, entity)
    return s
