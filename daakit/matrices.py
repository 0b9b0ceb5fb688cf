"""Strassen's seven-product multiplication of 2x2 matrices."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["strassen_2x2"]

Matrix = list[list[int]]


def _check(matrix: Sequence[Sequence[int]], name: str) -> None:
    if len(matrix) != 2 or any(len(row) != 2 for row in matrix):
        raise ValueError(f"{name} must be a 2x2 matrix")


def strassen_2x2(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Multiply two 2x2 matrices using seven products instead of eight."""
    _check(a, "a")
    _check(b, "b")
    (a11, a12), (a21, a22) = a
    (b11, b12), (b21, b22) = b

    m1 = (a11 + a22) * (b11 + b22)
    m2 = (a21 + a22) * b11
    m3 = a11 * (b12 - b22)
    m4 = a22 * (b21 - b11)
    m5 = (a11 + a12) * b22
    m6 = (a21 - a11) * (b11 + b12)
    m7 = (a12 - a22) * (b21 + b22)

    return [
        [m1 + m4 - m5 + m7, m3 + m5],
        [m2 + m4, m1 - m2 + m3 + m6],
    ]