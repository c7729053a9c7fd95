"""Block balance validation for Begin/End directive pairs."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from pbrtpy.ast import DirectiveKind
from pbrtpy.diagnostics.codes import (
    PARSER_UNCLOSED_BLOCK,
    PARSER_UNMATCHED_BLOCK_END,
    DiagnosticSpec,
)

BLOCK_PAIRS: Final[dict[DirectiveKind, DirectiveKind]] = {
    DirectiveKind.WORLD_BEGIN: DirectiveKind.WORLD_END,
    DirectiveKind.ATTRIBUTE_BEGIN: DirectiveKind.ATTRIBUTE_END,
    DirectiveKind.TRANSFORM_BEGIN: DirectiveKind.TRANSFORM_END,
    DirectiveKind.OBJECT_BEGIN: DirectiveKind.OBJECT_END,
}
_BLOCK_OPENERS: Final[dict[DirectiveKind, DirectiveKind]] = {end: begin for begin, end in BLOCK_PAIRS.items()}


@dataclass(frozen=True, slots=True)
class BlockImbalance:
    """First balance violation; `index` points at the offending directive."""

    index: int
    spec: DiagnosticSpec
    message: str


def find_block_imbalance(kinds: Sequence[DirectiveKind]) -> BlockImbalance | None:
    """Check Begin/End pairing over a directive sequence.

    One stack carries every block kind, so an End may only close the
    innermost open block of its own kind.
    """
    stack: list[tuple[DirectiveKind, int]] = []

    for index, kind in enumerate(kinds):
        if kind in BLOCK_PAIRS:
            stack.append((kind, index))
            continue

        opener = _BLOCK_OPENERS.get(kind)
        if opener is None:
            continue

        if not stack:
            return BlockImbalance(index, PARSER_UNMATCHED_BLOCK_END, f"{kind.value} without a matching {opener.value}")

        open_kind, _ = stack[-1]
        if open_kind != opener:
            return BlockImbalance(
                index,
                PARSER_UNMATCHED_BLOCK_END,
                f"{kind.value} cannot close the open {open_kind.value}",
            )
        stack.pop()

    if stack:
        open_kind, index = stack[-1]
        return BlockImbalance(
            index,
            PARSER_UNCLOSED_BLOCK,
            f"{open_kind.value} is never closed, expected {BLOCK_PAIRS[open_kind].value}",
        )
    return None
