"""
In-place Gauss-Jordan reduction of an augmented matrix.

The matrix is a list of rows (see ``polyfit.samples.new_matrix``). Every
entry is read as a Python float and the result is written back, so a float32
matrix rounds once per stored value exactly like single-precision storage.

Pivoting takes the first nonzero entry of a column, scanning down from the
current row. There is no magnitude-based pivot selection, and a column with
no nonzero entry is skipped, which leaves rank-deficient systems only
partially reduced.
"""

from __future__ import annotations

import logging

from polyfit.samples import Matrix

logger = logging.getLogger(__name__)


def divide_row(matrix: Matrix, row: int, col: int, num_cols: int) -> None:
    """Scale *row* so that its entry at *col* becomes exactly 1."""
    r = matrix[row]
    for j in range(col + 1, num_cols):
        r[j] = float(r[j]) / float(r[col])
    r[col] = 1


def eliminate(matrix: Matrix, row: int, col: int, num_rows: int, num_cols: int) -> None:
    """Zero column *col* in every row except *row* using the pivot row."""
    pivot_row = matrix[row]
    for i in range(num_rows):
        r = matrix[i]
        if i != row and r[col] != 0:
            factor = float(r[col])
            for j in range(col + 1, num_cols):
                r[j] = float(r[j]) - factor * float(pivot_row[j])
            r[col] = 0


def echelonize(matrix: Matrix) -> Matrix:
    """Reduce *matrix* to reduced row-echelon form in place and return it."""
    rows = len(matrix)
    cols = len(matrix[0])
    i = 0
    j = 0

    while i < rows and j < cols:
        k = i
        while k < rows and matrix[k][j] == 0:
            k += 1

        if k < rows:
            if k != i:
                matrix[i], matrix[k] = matrix[k], matrix[i]
            if matrix[i][j] != 1:
                divide_row(matrix, i, j, cols)
            eliminate(matrix, i, j, rows, cols)
            i += 1
        else:
            logger.debug("no pivot in column %d, leaving it unreduced", j)
        j += 1

    return matrix
