import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from notocore import build_tex_document, compile_document, generate_html, generate_html_document

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _read_text(path: str) -> str:
    try:
        with open(path, encoding="utf-8") as fin:
            return fin.read()
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc)
        raise SystemExit(1) from exc


def _write_text(path: str, text: str) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    logger.info("Wrote %s", out)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Render MiniTeX note source to HTML")
    parser.add_argument("path", help="Path to the note source file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--html-output",
        help="Write the HTML to the given path instead of stdout",
    )
    parser.add_argument(
        "--shell",
        help=(
            "HTML shell with a <!--CONTENT--> placeholder; the rendered "
            "fragment is embedded into it"
        ),
    )
    parser.add_argument(
        "--standalone",
        action="store_true",
        help="Embed the fragment into the built-in HTML shell",
    )
    parser.add_argument(
        "--tex-output",
        help="Also write a standalone LaTeX document of the raw source to the given path",
    )
    parser.add_argument(
        "--title",
        default="Noto Document",
        help="Title used for the LaTeX export when the source has no \\title{}",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    source = _read_text(args.path)
    logger.info("Compiling %s", args.path)
    doc = compile_document(source)
    logger.info("Parsed %d block(s)", len(doc.blocks))

    if args.shell:
        html = generate_html_document(doc, _read_text(args.shell))
    elif args.standalone:
        html = generate_html_document(doc)
    else:
        html = generate_html(doc)

    if args.html_output:
        _write_text(args.html_output, html)
    else:
        sys.stdout.write(html + "\n")

    if args.tex_output:
        title = doc.meta.title or args.title
        _write_text(args.tex_output, build_tex_document(source.strip(), title=title))


if __name__ == "__main__":
    main()
