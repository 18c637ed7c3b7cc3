"""Reassemble the service's AI suggestion fragments into typed content blocks.

The service returns suggestions as a flat list of loosely formatted lines.
Most lines stand alone and are classified by their prefix, but fenced code
blocks span several consecutive lines and have to be stitched back together:

    parse_suggestions(fragments)
        Outside      ── "```..." ──▶ InsideFence(lines=[])
        InsideFence  ── "```..." ──▶ Outside      (emits CodeBlock)
        InsideFence  ── other   ──▶ InsideFence  (line appended verbatim)
        Outside      ── other   ──▶ Outside      (emits classify_fragment())

A fence still open when the input runs out is flushed as a best-effort
CodeBlock rather than silently dropped.

The parser is pure: it never raises and keeps no state between calls, so it
is safe to re-run on every render of the same result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Literal, Union

FENCE = "```"


@dataclass(frozen=True)
class Heading:
    level: Literal[2, 3]
    text: str
    kind: str = field(default="heading", init=False)

    def __post_init__(self):
        if self.level not in (2, 3):
            raise ValueError(f"heading level must be 2 or 3, got {self.level!r}")


@dataclass(frozen=True)
class BulletItem:
    text: str
    kind: str = field(default="bullet", init=False)


@dataclass(frozen=True)
class CodeBlock:
    text: str
    kind: str = field(default="code", init=False)


@dataclass(frozen=True)
class Paragraph:
    text: str
    kind: str = field(default="paragraph", init=False)


ContentBlock = Union[Heading, BulletItem, CodeBlock, Paragraph]


# Ordered: "### " must be tried before "## " since both start with "##".
PREFIX_RULES: tuple[tuple[str, Callable[[str], ContentBlock]], ...] = (
    ("### ", lambda rest: Heading(level=3, text=rest)),
    ("## ", lambda rest: Heading(level=2, text=rest)),
    ("* ", lambda rest: BulletItem(text=rest)),
)


def is_fence(fragment: str) -> bool:
    """Return True if the fragment opens or closes a code fence.

    Anything after the backticks (usually a language tag) is ignored.
    """
    return fragment.startswith(FENCE)


def classify_fragment(fragment: str) -> ContentBlock:
    """Classify a single non-fence fragment by the first matching prefix rule."""
    for prefix, build in PREFIX_RULES:
        if fragment.startswith(prefix):
            return build(fragment[len(prefix) :])
    return Paragraph(text=fragment)


@dataclass
class _Outside:
    pass


@dataclass
class _InsideFence:
    lines: list[str] = field(default_factory=list)


def parse_suggestions(fragments: Iterable[str] | None) -> list[ContentBlock]:
    """Turn an ordered sequence of suggestion fragments into content blocks.

    Output order follows input order; a code block takes the position of its
    opening fence. ``None`` and an empty sequence both yield ``[]``.
    """
    blocks: list[ContentBlock] = []
    state: _Outside | _InsideFence = _Outside()

    for fragment in fragments or ():
        if isinstance(state, _InsideFence):
            if is_fence(fragment):
                blocks.append(CodeBlock(text="\n".join(state.lines)))
                state = _Outside()
            else:
                state.lines.append(fragment)
        elif is_fence(fragment):
            state = _InsideFence()
        else:
            blocks.append(classify_fragment(fragment))

    if isinstance(state, _InsideFence):
        blocks.append(CodeBlock(text="\n".join(state.lines)))

    return blocks


def to_fragments(blocks: Iterable[ContentBlock]) -> list[str]:
    """Serialize content blocks back to the fragment form the service sends."""
    fragments: list[str] = []
    for block in blocks:
        if isinstance(block, Heading):
            fragments.append("#" * block.level + " " + block.text)
        elif isinstance(block, BulletItem):
            fragments.append("* " + block.text)
        elif isinstance(block, CodeBlock):
            fragments.append(FENCE)
            if block.text:
                fragments.extend(block.text.split("\n"))
            fragments.append(FENCE)
        else:
            fragments.append(block.text)
    return fragments
