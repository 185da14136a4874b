"""Segments: groups of hits that the cellular automaton connects and rates."""

from __future__ import annotations

from collections.abc import Iterable

from kitrack.interfaces import Hit


class Segment:
    """A chain of hits that can have parent and child segments.

    Children are connected segments further inside, parents further outside.
    The state holds one entry per layer covered, so a segment skipping layers
    has several states.
    """

    def __init__(self, hits: Hit | Iterable[Hit]) -> None:
        self.hits: list[Hit] = [hits] if isinstance(hits, Hit) else list(hits)
        self.children: list[Segment] = []
        self.parents: list[Segment] = []
        self.state: list[int] = [0]
        self.layer: int = 0
        self.active: bool = False

    def add_child(self, child: Segment) -> None:
        self.children.append(child)

    def add_parent(self, parent: Segment) -> None:
        self.parents.append(parent)

    def delete_child(self, child: Segment) -> None:
        """Remove every link to the given child."""
        self.children = [c for c in self.children if c is not child]

    def delete_parent(self, parent: Segment) -> None:
        """Remove every link to the given parent."""
        self.parents = [p for p in self.parents if p is not parent]

    def raise_state(self) -> None:
        """Increase the innermost state by one."""
        if self.state:
            self.state[0] += 1

    @property
    def inner_state(self) -> int:
        return self.state[0]

    @property
    def outer_state(self) -> int:
        return self.state[-1]

    def set_skipped_layers(self, skipped_layers: int) -> None:
        """Resize the state to one entry per covered layer, padding with zeros."""
        size = skipped_layers + 1
        self.state = self.state[:size] + [0] * max(0, size - len(self.state))

    def __repr__(self) -> str:
        return (
            f"Segment(layer={self.layer}, hits={len(self.hits)}, "
            f"state={self.state}, active={self.active})"
        )