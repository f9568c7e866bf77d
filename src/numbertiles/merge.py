# merge.py
# Line merge pipeline: condense -> collapse -> convert.
#
# A line is a sequence of cell values already ordered so that index 0 is the
# leading edge. The pipeline never touches the board; it only describes the
# relocations and merges needed to slide that line, as elementary orders.

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Union

from .core import CellValue


class TokenKind(Enum):
    """What happens to a tile within its line."""
    STATIONARY = 1    # Not moved, no merge partner yet
    RELOCATE = 2      # Slides without merging
    SINGLE_MERGE = 3  # An in-place tile absorbs the tile behind it
    DOUBLE_MERGE = 4  # Two tiles slide and meet at a new slot


@dataclass(frozen=True)
class ActionToken:
    kind: TokenKind
    source: int
    value: int
    second_source: int = -1  # Only meaningful for DOUBLE_MERGE


@dataclass(frozen=True)
class RelocateOrder:
    """Move one tile from `source` to `destination`; `merged` means score += value."""
    source: int
    destination: int
    value: int
    merged: bool


@dataclass(frozen=True)
class DoubleRelocateOrder:
    """Two tiles leave their slots and combine at `destination`."""
    first_source: int
    second_source: int
    destination: int
    value: int


MoveOrder = Union[RelocateOrder, DoubleRelocateOrder]


def _still_in_place(index: int, output_length: int, source: int) -> bool:
    # A stationary token only keeps its slot while nothing before it merged.
    return index == output_length and source == index


def condense(cells: Sequence[CellValue]) -> List[ActionToken]:
    """
    Drops empty cells, tagging each tile as stationary or relocating.
    Args:
        cells (Sequence[CellValue]): One line, leading edge first.
    Returns:
        List[ActionToken]: One token per occupied cell.
    """
    tokens: List[ActionToken] = []
    for index, value in enumerate(cells):
        if value is None:
            continue
        kind = TokenKind.STATIONARY if len(tokens) == index else TokenKind.RELOCATE
        tokens.append(ActionToken(kind, index, value))
    return tokens


def collapse(tokens: Sequence[ActionToken]) -> List[ActionToken]:
    """
    Pairs equal neighbours into merges in a single left-to-right pass.
    A tile consumed by a merge is never looked at again, so three equal tiles
    merge only the first two.
    Args:
        tokens (Sequence[ActionToken]): Output of `condense`.
    Returns:
        List[ActionToken]: Tokens indexed by their destination slot.
    Raises:
        ValueError: If a merge token is passed in.
    """
    output: List[ActionToken] = []
    n = len(tokens)
    index = 0

    while index < n:
        token = tokens[index]
        if token.kind in (TokenKind.SINGLE_MERGE, TokenKind.DOUBLE_MERGE):
            raise ValueError(f"collapse cannot take a {token.kind.name} token as input.")

        nxt = tokens[index + 1] if index + 1 < n else None

        if nxt is not None and nxt.value == token.value:
            merged_value = token.value + nxt.value
            if token.kind == TokenKind.STATIONARY and _still_in_place(index, len(output), token.source):
                output.append(ActionToken(TokenKind.SINGLE_MERGE, nxt.source, merged_value))
            else:
                output.append(
                    ActionToken(TokenKind.DOUBLE_MERGE, token.source, merged_value, second_source=nxt.source)
                )
            index += 2
            continue

        if token.kind == TokenKind.STATIONARY and not _still_in_place(index, len(output), token.source):
            output.append(ActionToken(TokenKind.RELOCATE, token.source, token.value))
        else:
            output.append(token)
        index += 1

    return output


def convert(tokens: Sequence[ActionToken]) -> List[MoveOrder]:
    """Turns collapsed tokens into orders; the token's position is its destination."""
    orders: List[MoveOrder] = []
    for destination, token in enumerate(tokens):
        if token.kind == TokenKind.RELOCATE:
            orders.append(RelocateOrder(token.source, destination, token.value, merged=False))
        elif token.kind == TokenKind.SINGLE_MERGE:
            orders.append(RelocateOrder(token.source, destination, token.value, merged=True))
        elif token.kind == TokenKind.DOUBLE_MERGE:
            orders.append(DoubleRelocateOrder(token.source, token.second_source, destination, token.value))
        # STATIONARY tiles produce nothing
    return orders


def merge_line(cells: Sequence[CellValue]) -> List[MoveOrder]:
    """
    Computes the elementary orders that slide one line towards index 0.
    Args:
        cells (Sequence[CellValue]): One line, leading edge first.
    Returns:
        List[MoveOrder]: Empty when the line cannot move.
    """
    return convert(collapse(condense(cells)))
