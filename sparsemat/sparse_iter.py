"""Merged iteration over the non-zeros of two sparse vectors.

Both inputs are iterables of ``(index, value)`` pairs sorted by strictly
increasing index, such as the non-zeros of a sparse vector.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Tuple, Union


@dataclass(frozen=True)
class Left:
    """A non-zero present only in the left vector."""

    index: int
    value: Any


@dataclass(frozen=True)
class Right:
    """A non-zero present only in the right vector."""

    index: int
    value: Any


@dataclass(frozen=True)
class Both:
    """An index holding a non-zero in both vectors."""

    index: int
    left: Any
    right: Any


NnzEither = Union[Left, Right, Both]

_DONE = object()


def nnz_or_zip(
    left: Iterable[Tuple[int, Any]], right: Iterable[Tuple[int, Any]]
) -> Iterator[NnzEither]:
    """Yield the non-zeros of either vector in index order.

    Indices present in both vectors come out as a single ``Both``; the others
    as ``Left`` or ``Right``. Useful for element-wise sums of vectors.
    """
    left_it, right_it = iter(left), iter(right)
    lnext = next(left_it, _DONE)
    rnext = next(right_it, _DONE)
    while lnext is not _DONE or rnext is not _DONE:
        if rnext is _DONE:
            yield Left(*lnext)
            lnext = next(left_it, _DONE)
        elif lnext is _DONE:
            yield Right(*rnext)
            rnext = next(right_it, _DONE)
        else:
            lind, lval = lnext
            rind, rval = rnext
            if lind < rind:
                yield Left(lind, lval)
                lnext = next(left_it, _DONE)
            elif lind > rind:
                yield Right(rind, rval)
                rnext = next(right_it, _DONE)
            else:
                yield Both(lind, lval, rval)
                lnext = next(left_it, _DONE)
                rnext = next(right_it, _DONE)


def nnz_zip(
    left: Iterable[Tuple[int, Any]], right: Iterable[Tuple[int, Any]]
) -> Iterator[Tuple[int, Any, Any]]:
    """Yield ``(index, left_value, right_value)`` where both vectors are non-zero."""
    for item in nnz_or_zip(left, right):
        if isinstance(item, Both):
            yield item.index, item.left, item.right