"""
Affine transformation matrix in PDF convention.

A PDF matrix [a b c d e f] maps (x, y) to (a*x + c*y + e, b*x + d*y + f).
It is stored as a 3x3 numpy array using row vectors:

    | a b 0 |
    | c d 0 |
    | e f 1 |
"""
from typing import List, Tuple

import numpy as np


class Matrix:
    """2D affine transform."""

    def __init__(self, a: float = 1.0, b: float = 0.0, c: float = 0.0,
                 d: float = 1.0, e: float = 0.0, f: float = 0.0):
        self._values = np.array([
            [a, b, 0.0],
            [c, d, 0.0],
            [e, f, 1.0],
        ], dtype=float)

    @classmethod
    def translate(cls, tx: float, ty: float) -> 'Matrix':
        return cls(1.0, 0.0, 0.0, 1.0, tx, ty)

    def transform_point(self, x: float, y: float) -> Tuple[float, float]:
        """Apply the transform to a point."""
        px, py, _ = np.array([x, y, 1.0]) @ self._values
        return float(px), float(py)

    def to_list(self) -> List[float]:
        """Six-number PDF array form [a b c d e f]."""
        v = self._values
        return [float(v[0, 0]), float(v[0, 1]), float(v[1, 0]),
                float(v[1, 1]), float(v[2, 0]), float(v[2, 1])]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.allclose(self._values, other._values))

    def __repr__(self) -> str:
        return f"Matrix({', '.join(f'{v:g}' for v in self.to_list())})"
