"""Triplet (coordinate) format sparse matrices.

A triplet matrix stores three parallel sequences: the row indices, the
column indices and the values of its non-zero entries. It is meant for
building a matrix, not for computing with it; entries at the same location
are summed when converting to a compressed matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from .triplet_iter import CompressedMatrix, TriMatIter


@dataclass(frozen=True)
class TripletIndex:
    """Position of an entry in the storage of a triplet matrix."""

    index: int


class TriMat:
    """A sparse matrix stored as a list of ``(row, col, value)`` triplets."""

    def __init__(self, shape: tuple[int, int]) -> None:
        self.rows, self.cols = shape
        self._row_inds: list[int] = []
        self._col_inds: list[int] = []
        self._data: list[Any] = []

    @classmethod
    def from_triplets(
        cls,
        shape: tuple[int, int],
        row_inds: Iterable[int],
        col_inds: Iterable[int],
        data: Iterable[Any],
    ) -> "TriMat":
        """Build a matrix from its raw components, which must share one length."""
        row_inds, col_inds, data = list(row_inds), list(col_inds), list(data)
        if not len(row_inds) == len(col_inds) == len(data):
            raise ValueError("all inputs should have the same length")
        rows, cols = shape
        if not all(0 <= i < rows for i in row_inds):
            raise IndexError("row indices should be within shape")
        if not all(0 <= j < cols for j in col_inds):
            raise IndexError("col indices should be within shape")
        mat = cls(shape)
        mat._row_inds, mat._col_inds, mat._data = row_inds, col_inds, data
        return mat

    @classmethod
    def _sharing(
        cls,
        shape: tuple[int, int],
        row_inds: list[int],
        col_inds: list[int],
        data: list[Any],
    ) -> "TriMat":
        mat = cls(shape)
        mat._row_inds, mat._col_inds, mat._data = row_inds, col_inds, data
        return mat

    def __repr__(self) -> str:
        return (
            f"TriMat(shape={self.shape()!r}, row_inds={self._row_inds!r}, "
            f"col_inds={self._col_inds!r}, data={self._data!r})"
        )

    @property
    def row_inds(self) -> tuple[int, ...]:
        return tuple(self._row_inds)

    @property
    def col_inds(self) -> tuple[int, ...]:
        return tuple(self._col_inds)

    @property
    def data(self) -> tuple[Any, ...]:
        return tuple(self._data)

    def add_triplet(self, row: int, col: int, val: Any) -> None:
        """Append a non-zero entry."""
        if not 0 <= row < self.rows:
            raise IndexError(f"row {row} out of bounds for {self.rows} rows")
        if not 0 <= col < self.cols:
            raise IndexError(f"col {col} out of bounds for {self.cols} cols")
        self._row_inds.append(row)
        self._col_inds.append(col)
        self._data.append(val)

    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def nnz(self) -> int:
        """Number of stored entries, duplicates included."""
        return len(self._data)

    def find_locations(self, row: int, col: int) -> list[TripletIndex]:
        """All storage positions holding an entry at ``(row, col)``."""
        return [
            TripletIndex(position)
            for position, (i, j) in enumerate(zip(self._row_inds, self._col_inds))
            if i == row and j == col
        ]

    def set_triplet(self, index: TripletIndex, row: int, col: int, val: Any) -> None:
        """Replace the entry stored at ``index``, as found by ``find_locations``."""
        position = index.index
        self._row_inds[position] = row
        self._col_inds[position] = col
        self._data[position] = val

    def transpose_view(self) -> "TriMat":
        """The transposed matrix, sharing this matrix's storage."""
        return TriMat._sharing(
            (self.cols, self.rows), self._col_inds, self._row_inds, self._data
        )

    def triplet_iter(self) -> TriMatIter:
        return TriMatIter(
            self.shape(), self.nnz(), self._row_inds, self._col_inds, self._data
        )

    def __iter__(self) -> Iterator[tuple[Any, tuple[int, int]]]:
        """Yield ``(value, (row, col))`` for each stored entry, in storage order."""
        return iter(self.triplet_iter())

    def to_csc(self) -> CompressedMatrix:
        return self.triplet_iter().into_csc()

    def to_csr(self) -> CompressedMatrix:
        return self.triplet_iter().into_csr()