"""Compressed sparse matrices and their construction from triplets."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from itertools import accumulate, groupby, pairwise
from typing import Any, Iterator, Sequence


class CompressedStorage(Enum):
    """Storage order of a compressed sparse matrix."""

    CSR = "csr"
    CSC = "csc"

    def other(self) -> "CompressedStorage":
        return CompressedStorage.CSC if self is CompressedStorage.CSR else CompressedStorage.CSR


@dataclass
class CompressedMatrix:
    """A sparse matrix in compressed row (CSR) or column (CSC) storage.

    ``indptr`` has one entry per outer dimension plus one; the non-zeros of
    outer lane ``k`` are ``indices[indptr[k]:indptr[k + 1]]`` with the
    matching ``data``. Inner indices are strictly increasing in each lane.
    """

    storage: CompressedStorage
    rows: int
    cols: int
    indptr: list
    indices: list
    data: list

    def __post_init__(self) -> None:
        self.indptr = list(self.indptr)
        self.indices = list(self.indices)
        self.data = list(self.data)
        outer_dims, inner_dims = self._dims()
        if len(self.indptr) != outer_dims + 1:
            raise ValueError("indptr length does not match the outer dimension")
        if len(self.indices) != len(self.data):
            raise ValueError("indices and data do not have compatible lengths")
        if self.indptr[0] != 0 or self.indptr[-1] != len(self.indices):
            raise ValueError("indptr does not span the indices")
        for start, stop in pairwise(self.indptr):
            if stop < start:
                raise ValueError("indptr is not sorted")
            lane = self.indices[start:stop]
            if any(i < 0 or i >= inner_dims for i in lane):
                raise ValueError("index out of bounds")
            if any(a >= b for a, b in pairwise(lane)):
                raise ValueError("unsorted or duplicate indices")

    def _dims(self) -> tuple[int, int]:
        if self.storage is CompressedStorage.CSR:
            return self.rows, self.cols
        return self.cols, self.rows

    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def nnz(self) -> int:
        return len(self.data)

    def is_csr(self) -> bool:
        return self.storage is CompressedStorage.CSR

    def outer_iterator(self) -> Iterator[list[tuple[int, Any]]]:
        """Yield, for each outer lane, its ``(inner_index, value)`` pairs."""
        for start, stop in pairwise(self.indptr):
            yield list(zip(self.indices[start:stop], self.data[start:stop]))

    def to_other_storage(self) -> "CompressedMatrix":
        """Return the same matrix in the other storage order."""
        outer_inds = [
            outer
            for outer, (start, stop) in enumerate(pairwise(self.indptr))
            for _ in range(start, stop)
        ]
        if self.is_csr():
            row_inds, col_inds = outer_inds, self.indices
        else:
            row_inds, col_inds = self.indices, outer_inds
        triplets = TriMatIter(self.shape(), self.nnz(), row_inds, col_inds, self.data)
        return triplets.into_cs(self.storage.other())

    def _copy(self) -> "CompressedMatrix":
        return CompressedMatrix(
            self.storage, self.rows, self.cols, self.indptr, self.indices, self.data
        )

    def to_csr(self) -> "CompressedMatrix":
        return self._copy() if self.is_csr() else self.to_other_storage()

    def to_csc(self) -> "CompressedMatrix":
        return self.to_other_storage() if self.is_csr() else self._copy()


class TriMatIter:
    """The non-zero entries of a matrix as parallel row, column and value sequences."""

    def __init__(
        self,
        shape: tuple[int, int],
        nnz: int,
        row_inds: Sequence[int],
        col_inds: Sequence[int],
        data: Sequence[Any],
    ) -> None:
        self.rows, self.cols = shape
        self.nnz = nnz
        self.row_inds = list(row_inds)
        self.col_inds = list(col_inds)
        self.data = list(data)

    def __iter__(self) -> Iterator[tuple[Any, tuple[int, int]]]:
        for row, col, val in zip(self.row_inds, self.col_inds, self.data):
            yield val, (row, col)

    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def transpose_into(self) -> "TriMatIter":
        return TriMatIter(
            (self.cols, self.rows), self.nnz, self.col_inds, self.row_inds, self.data
        )

    def into_csc(self) -> CompressedMatrix:
        return self.into_cs(CompressedStorage.CSC)

    def into_csr(self) -> CompressedMatrix:
        return self.into_cs(CompressedStorage.CSR)

    def into_cs(self, storage: CompressedStorage) -> CompressedMatrix:
        """Build a compressed matrix, summing entries at duplicate locations."""
        if storage is CompressedStorage.CSR:
            outer_dims = self.rows

            def key(entry):
                return entry[0], entry[1]

        else:
            outer_dims = self.cols

            def key(entry):
                return entry[1], entry[0]

        entries = sorted(zip(self.row_inds, self.col_inds, self.data), key=key)
        counts = [0] * (outer_dims + 1)
        indices: list[int] = []
        data: list[Any] = []
        for (outer, inner), group in groupby(entries, key=key):
            if not 0 <= outer < outer_dims:
                raise ValueError("triplet index out of bounds")
            counts[outer + 1] += 1
            indices.append(inner)
            data.append(reduce(operator.add, (entry[2] for entry in group)))
        return CompressedMatrix(
            storage, self.rows, self.cols, list(accumulate(counts)), indices, data
        )