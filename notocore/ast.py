from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Meta:
    title: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None


# Inlines

@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Bold:
    children: Tuple["Inline", ...] = ()


@dataclass(frozen=True)
class Italic:
    children: Tuple["Inline", ...] = ()


@dataclass(frozen=True)
class Code:
    text: str


@dataclass(frozen=True)
class InlineMath:
    source: str  # without the surrounding $


Inline = Union[Text, Bold, Italic, Code, InlineMath]


# Blocks

@dataclass(frozen=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True)
class Paragraph:
    inlines: Tuple[Inline, ...] = ()


@dataclass(frozen=True)
class UnorderedList:
    items: Tuple[Tuple[Inline, ...], ...] = ()


@dataclass(frozen=True)
class OrderedList:
    items: Tuple[Tuple[Inline, ...], ...] = ()


@dataclass(frozen=True)
class Blockquote:
    inlines: Tuple[Inline, ...] = ()


@dataclass(frozen=True)
class DisplayMath:
    source: str  # without the surrounding $$


Block = Union[Heading, Paragraph, UnorderedList, OrderedList, Blockquote, DisplayMath]


@dataclass(frozen=True)
class MiniDocument:
    meta: Meta = field(default_factory=Meta)
    blocks: Tuple[Block, ...] = ()

    def log_summary(self) -> str:
        return f"MiniDocument(blocks={len(self.blocks)}, title={self.meta.title!r})"
