"""Grouping of flat content blocks into renderable units."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from .types import ContentBlock, ListItem


@dataclass(frozen=True)
class ListGroup:
    """A run of consecutive list items rendered as one list.

    Attributes:
        ordered: Taken from the first item of the run
        items: The list items, in original order
    """

    ordered: bool
    items: tuple[ListItem, ...]


RenderUnit = Union[ContentBlock, ListGroup]


def normalize_blocks(blocks: Iterable[ContentBlock]) -> list[RenderUnit]:
    """Merge consecutive list items into ListGroups.

    Every other block passes through unchanged, in original order.

    Example:
        [P, L(a), L(b), Q, L(c)] -> [P, ListGroup[a, b], Q, ListGroup[c]]
    """
    units: list[RenderUnit] = []
    current: list[ListItem] = []

    for block in blocks:
        if isinstance(block, ListItem):
            current.append(block)
            continue
        if current:
            units.append(_group(current))
            current = []
        units.append(block)

    if current:
        units.append(_group(current))

    return units


def _group(items: list[ListItem]) -> ListGroup:
    return ListGroup(ordered=items[0].ordered, items=tuple(items))
