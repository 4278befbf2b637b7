"""
Normal equations of a least-squares polynomial fit.

For degree p the system is (p+1) x (p+1) with entries S[r+c] = sum(x_i**(r+c)).
Each power sum is computed once and reused along the anti-diagonals, and the
right-hand side sum(x_i**r * y_i) is accumulated straight into storage
precision.
"""

from __future__ import annotations

from polyfit.gauss_jordan import echelonize
from polyfit.metrics import power
from polyfit.samples import Matrix, SampleKind, SampleSet, Vector, new_matrix, new_vector


def accumulate_power_sums(
    pairs: list[tuple[float, float]], power_sums: list[float], rhs: Vector
) -> None:
    """Add every sample's powers into *power_sums* (1..2p) and *rhs* (0..p).

    ``power_sums[0]`` is expected to already hold the sample count.
    """
    span = len(power_sums)
    size = len(rhs)
    for x, y in pairs:
        for r in range(1, span):
            power_sums[r] += power(x, r)
        rhs[0] = float(rhs[0]) + y
        for r in range(1, size):
            rhs[r] = float(rhs[r]) + power(x, r) * y


def build_augmented_matrix(power_sums: list[float], rhs: Vector, kind: SampleKind) -> Matrix:
    size = len(rhs)
    matrix = new_matrix(kind, size, size + 1)
    for r in range(size):
        row = matrix[r]
        for c in range(size):
            row[c] = power_sums[r + c]
        row[size] = rhs[r]
    return matrix


def extract_coefficients(matrix: Matrix, kind: SampleKind) -> Vector:
    """Last column of a reduced matrix, lowest power first."""
    terms = new_vector(kind, len(matrix))
    for i, row in enumerate(matrix):
        terms[i] = row[-1]
    return terms


def solve_normal_equations(samples: SampleSet, degree: int) -> Vector:
    size = degree + 1
    power_sums = [float(len(samples))] + [0.0] * (2 * degree)
    rhs = new_vector(samples.kind, size)

    accumulate_power_sums(samples.pairs(), power_sums, rhs)
    matrix = build_augmented_matrix(power_sums, rhs, samples.kind)
    echelonize(matrix)
    return extract_coefficients(matrix, samples.kind)
