# sparsemat

Sparse matrices in plain Python, with no dependencies: a triplet
(coordinate) format for building matrices, compressed row and column
storage, pattern rendering, merged iteration over sparse index/value
sequences, and a fixed-capacity double stack for graph traversals.

## Modules

- `sparsemat.triplet`
  - `TriMat(shape)` is a triplet matrix that you fill with
    `add_triplet(row, col, val)`.
  - `TriMat.from_triplets(shape, row_inds, col_inds, data)` builds one from
    parallel sequences.
  - `find_locations(row, col)` returns `TripletIndex` positions, and
    `set_triplet(index, row, col, val)` replaces an entry.
  - `transpose_view()` returns the transpose, which shares the same storage.
  - Iterating over a `TriMat`, or over `triplet_iter()`, yields
    `(value, (row, col))`.
  - `to_csr()` and `to_csc()` convert to compressed form. Entries at the same
    location are summed.
- `sparsemat.triplet_iter`
  - `CompressedStorage` is an enum with the members `CSR` and `CSC`.
  - `CompressedMatrix` has the fields `storage`, `rows`, `cols`, `indptr`,
    `indices` and `data`. It is validated on construction and has the methods
    `shape()`, `nnz()`, `is_csr()`, `outer_iterator()`, `to_csr()`,
    `to_csc()` and `to_other_storage()`.
  - `TriMatIter` holds parallel row, column and value sequences. It has
    `transpose_into()`, `into_csr()`, `into_csc()` and `into_cs(storage)`.
- `sparsemat.visu`
  - `nnz_pattern_formatter(mat)` returns the non-zero pattern as text.
  - `print_nnz_pattern(mat)` prints that pattern.
  - `nnz_image(mat)` returns the pattern as a list of rows, with 255 for
    zeros and 0 for non-zeros.
- `sparsemat.sparse_iter`
  - `nnz_or_zip(left, right)` merges two index-sorted iterables of
    `(index, value)` pairs. It yields `Left`, `Right` or `Both` items.
  - `nnz_zip(left, right)` yields `(index, left_value, right_value)` only
    where both inputs have an entry.
- `sparsemat.stack`
  - `DStack(n)` is two stacks that share `n` slots. They grow from opposite
    ends.
  - `Enter` and `Exit` are traversal markers.
  - `extract_stack_val` unwraps an `Enter` or `Exit` marker.

## Installation

```
pip install .
```

## Example

```python
from sparsemat.triplet import TriMat
from sparsemat.visu import nnz_pattern_formatter, nnz_image
from sparsemat.sparse_iter import nnz_or_zip, nnz_zip

tri = TriMat((3, 3))
tri.add_triplet(0, 1, 1.0)
tri.add_triplet(1, 0, 1.0)
tri.add_triplet(2, 1, 1.0)
tri.add_triplet(2, 2, 1.0)
csc = tri.to_csc()
print(csc.indptr, csc.indices)   # [0, 1, 3, 4] [1, 0, 2, 2]
print(nnz_pattern_formatter(csc), end="")
# | x |
# |x  |
# | xx|
print(nnz_image(csc))            # [[255, 0, 255], [0, 255, 255], [255, 0, 0]]

left = [(0, 1.0), (2, 2.0), (4, 3.0)]
right = [(1, -1.0), (2, -2.0), (3, -3.0)]
print(list(nnz_zip(left, right)))  # [(2, 2.0, -2.0)]
for item in nnz_or_zip(left, right):
    print(item)
# Left(index=0, value=1.0)
# Right(index=1, value=-1.0)
# Both(index=2, left=2.0, right=-2.0)
# Right(index=3, value=-3.0)
# Left(index=4, value=3.0)
```

## Errors

- `TriMat.add_triplet` raises `IndexError` for a location outside the
  shape.
- `TriMat.from_triplets` raises `ValueError` when the three sequences differ
  in length, and `IndexError` for out-of-bounds indices.
- `CompressedMatrix` raises `ValueError` when its `indptr`, `indices` or
  `data` are inconsistent. This covers out-of-bounds, unsorted or duplicate
  indices within a lane.
- `DStack` raises `ValueError` for a capacity below 2 and `OverflowError`
  when a push would make the two stacks overlap.
- `extract_stack_val` raises `TypeError` for anything but `Enter` or `Exit`.

## What it does not do

- There is no sparse vector type.
- There is no dot product, norm or vector arithmetic.
- There are no matrix products and no factorizations or solvers.

Sparse vectors can be handled only as sorted `(index, value)` sequences
through `sparsemat.sparse_iter`.

## Running the tests

```
pip install ".[test]"
pytest
```