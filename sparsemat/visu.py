"""Text and image renderings of the non-zero pattern of a sparse matrix."""

from __future__ import annotations

from .triplet_iter import CompressedMatrix


def nnz_pattern_formatter(mat: CompressedMatrix) -> str:
    """Render the non-zero pattern, one ``|...|`` line per row, ``x`` for non-zeros."""
    csr = mat if mat.is_csr() else mat.to_other_storage()
    lines = []
    for row in csr.outer_iterator():
        cells = [" "] * csr.cols
        for col, _ in row:
            cells[col] = "x"
        lines.append("|" + "".join(cells) + "|\n")
    return "".join(lines)


def print_nnz_pattern(mat: CompressedMatrix) -> None:
    """Print the non-zero pattern of ``mat`` to standard output."""
    print(nnz_pattern_formatter(mat), end="")


def nnz_image(mat: CompressedMatrix) -> list[list[int]]:
    """Black and white image of the pattern: 255 for zeros, 0 for non-zeros."""
    rows, cols = mat.shape()
    image = [[255] * cols for _ in range(rows)]
    for outer, lane in enumerate(mat.outer_iterator()):
        for inner, _ in lane:
            i, j = (outer, inner) if mat.is_csr() else (inner, outer)
            image[i][j] = 0
    return image