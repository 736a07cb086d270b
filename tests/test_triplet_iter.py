import pytest

from sparsemat.triplet_iter import CompressedMatrix, CompressedStorage, TriMatIter

CSC = CompressedStorage.CSC
CSR = CompressedStorage.CSR


def _expected_4x4():
    # |1 2    |
    # |3      |
    # |      4|
    # |    5 6|
    return CompressedMatrix(
        CSC, 4, 4, [0, 2, 3, 4, 6], [0, 1, 0, 3, 2, 3], [1.0, 3.0, 2.0, 5.0, 4.0, 6.0]
    )


def _triplets(shape, entries):
    rows = [r for r, _, _ in entries]
    cols = [c for _, c, _ in entries]
    data = [v for _, _, v in entries]
    return TriMatIter(shape, len(entries), rows, cols, data)


def test_incremental_to_csc():
    it = _triplets(
        (4, 4),
        [(0, 0, 1.0), (0, 1, 2.0), (1, 0, 3.0), (2, 3, 4.0), (3, 2, 5.0), (3, 3, 6.0)],
    )
    csc = it.into_csc()
    assert csc == _expected_4x4()
    assert csc.nnz() == len(it.data)


def test_unordered_triplets_are_sorted():
    it = _triplets(
        (4, 4),
        [(0, 1, 2.0), (0, 0, 1.0), (1, 0, 3.0), (2, 3, 4.0), (3, 3, 6.0), (3, 2, 5.0)],
    )
    assert it.into_csc() == _expected_4x4()
    assert it.into_csr().to_csc() == _expected_4x4()


def test_duplicates_are_summed():
    it = _triplets(
        (4, 4),
        [
            (0, 1, 2.0),
            (0, 0, 1.0),
            (3, 2, 3.0),
            (1, 0, 3.0),
            (2, 3, 4.0),
            (3, 3, 6.0),
            (3, 2, 2.0),
        ],
    )
    expected = _expected_4x4()
    assert it.into_csc() == expected
    assert it.into_csr() == expected.to_csr()


def test_rectangular_from_vecs():
    it = TriMatIter(
        (5, 4),
        8,
        [0, 0, 1, 2, 3, 3, 4, 4],
        [0, 1, 0, 3, 2, 3, 1, 3],
        [1, 2, 3, 4, 5, 6, 7, 8],
    )
    expected = CompressedMatrix(
        CSC, 5, 4, [0, 2, 4, 5, 8], [0, 1, 0, 4, 3, 2, 3, 4], [1, 3, 2, 7, 5, 4, 6, 8]
    )
    assert it.into_csc() == expected
    assert it.into_csr() == expected.to_csr()


def test_empty_matrix():
    it = TriMatIter((2, 4), 0, [], [], [])
    csr = it.into_csr()
    assert csr.indptr == [0, 0, 0]
    assert csr.indices == []
    assert csr.data == []
    assert it.into_csc().indptr == [0, 0, 0, 0, 0]


def test_trailing_empty_lanes():
    it = _triplets((4, 6), [(1, 1, 1), (0, 3, 2)])
    csc = it.into_csc()
    assert csc.indptr == [0, 0, 1, 1, 2, 2, 2]
    assert csc.indices == [1, 0]
    assert csc.data == [1, 2]


def test_iteration_yields_value_and_location():
    it = _triplets((4, 4), [(0, 0, 1.0), (2, 3, 4.0)])
    items = list(it)
    assert items == [(1.0, (0, 0)), (4.0, (2, 3))]
    assert it.shape() == (4, 4)


def test_transpose_into_swaps_roles():
    it = _triplets((5, 4), [(0, 1, 2), (4, 3, 8), (2, 0, 5)])
    transposed = it.transpose_into()
    assert transposed.shape() == (4, 5)
    csr = it.into_csr()
    csc_t = transposed.into_csc()
    assert (csc_t.indptr, csc_t.indices, csc_t.data) == (csr.indptr, csr.indices, csr.data)


def test_out_of_bounds_triplet_raises():
    it = _triplets((2, 2), [(0, 5, 1.0)])
    with pytest.raises(ValueError):
        it.into_csr()
    with pytest.raises(ValueError):
        it.into_csc()


def test_storage_conversions_round_trip():
    mat = _expected_4x4()
    assert not mat.is_csr()
    csr = mat.to_csr()
    assert csr.is_csr()
    assert csr.shape() == mat.shape()
    assert csr.to_csc() == mat
    assert mat.to_other_storage().to_other_storage() == mat
    assert mat.to_csc() == mat


def test_outer_iterator():
    mat = _expected_4x4()
    assert list(mat.outer_iterator()) == [
        [(0, 1.0), (1, 3.0)],
        [(0, 2.0)],
        [(3, 5.0)],
        [(2, 4.0), (3, 6.0)],
    ]


@pytest.mark.parametrize(
    "indptr, indices, data",
    [
        ([0, 1, 2], [0, 1], [1.0, 2.0]),
        ([0, 2, 2, 2, 2], [1, 0], [1.0, 2.0]),
        ([0, 1, 1, 1, 1], [7], [1.0]),
        ([0, 1, 1, 1, 2], [0, 1], [1.0]),
    ],
)
def test_invalid_structure_is_rejected(indptr, indices, data):
    with pytest.raises(ValueError):
        CompressedMatrix(CSR, 4, 4, indptr, indices, data)