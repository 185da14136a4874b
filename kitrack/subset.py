"""Selecting a compatible, high-quality subset out of a set of elements."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")

log = logging.getLogger(__name__)


class Subset(Generic[T]):
    """Collects elements and holds the accepted and rejected ones."""

    def __init__(self) -> None:
        self._elements: list[T] = []
        self._accepted: list[T] = []
        self._rejected: list[T] = []

    def add(self, element: T) -> None:
        self._elements.append(element)

    def add_all(self, elements: Iterable[T]) -> None:
        self._elements.extend(elements)

    @property
    def elements(self) -> list[T]:
        return list(self._elements)

    @property
    def accepted(self) -> list[T]:
        """The elements in the best subset."""
        return list(self._accepted)

    @property
    def rejected(self) -> list[T]:
        """The elements left out of the best subset."""
        return list(self._rejected)


class SubsetSimple(Subset[T]):
    """Greedy selection: keep the best element, drop what conflicts with it, repeat."""

    def calculate_best_set(
        self,
        are_compatible: Callable[[T, T], bool],
        get_qi: Callable[[T], float],
    ) -> None:
        """Split the elements into accepted and rejected ones.

        The element with the highest quality is accepted, all elements
        incompatible with it are rejected, and the procedure is repeated on
        what remains.
        """
        remaining = sorted(self._elements, key=get_qi, reverse=True)

        if log.isEnabledFor(logging.DEBUG):
            for element in remaining:
                log.debug("element %r has QI %s", element, get_qi(element))

        n_accepted = n_rejected = 0
        while remaining:
            best, *rest = remaining
            remaining = []
            for element in rest:
                if are_compatible(best, element):
                    remaining.append(element)
                else:
                    log.debug("reject %r", element)
                    self._rejected.append(element)
                    n_rejected += 1
            log.debug("accept %r", best)
            self._accepted.append(best)
            n_accepted += 1

        log.debug(
            "SubsetSimple accepted %d elements and rejected %d elements of all in all %d elements.",
            n_accepted,
            n_rejected,
            n_accepted + n_rejected,
        )