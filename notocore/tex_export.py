"""Standalone LaTeX export of a note's source text."""

TEX_TEMPLATE = r"""\documentclass[11pt]{article}
\usepackage[utf8]{inputenc}
\usepackage{amsmath, amssymb, amsfonts}
\usepackage[margin=1in]{geometry}
\usepackage{graphicx}
\usepackage{hyperref}

\title{%s}
\author{Noto}
\date{\today}

\begin{document}
\maketitle

%s

\end{document}
"""


def build_tex_document(body: str, title: str = "Noto Document") -> str:
    return TEX_TEMPLATE % (title, body)
