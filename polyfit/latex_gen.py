from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import sympy as sp


class LatexGenerator:
    """Render fitted coefficients as display-math LaTeX.

    Approx mode  → every coefficient becomes an sp.Float with *decimals* places.
    Exact mode   → every coefficient becomes an sp.Rational with denominator ≤ 1000.
    """

    def __init__(self, approx: bool = True, decimals: int = 3) -> None:
        self.approx = approx
        self.decimals = max(0, min(10, int(decimals)))

    def reconfigure(self, approx: bool, decimals: int) -> None:
        self.approx = approx
        self.decimals = max(0, min(10, int(decimals)))

    def generate(self, coefficients: Sequence[Any], variable: str = "x") -> str:
        x = sp.Symbol(variable)
        expr = sp.Add(*[self._n(float(c)) * x ** k for k, c in enumerate(coefficients)])
        return self._wrap(expr, variable)

    def _n(self, v: float) -> sp.Expr:
        if self.approx:
            return sp.Float(f"{v:.{self.decimals}f}")
        return sp.Rational(v).limit_denominator(1000)

    def _round_floats(self, expr: sp.Basic) -> sp.Basic:
        """Walk *expr* and round every sp.Float leaf to self.decimals places.

        sympy re-normalises products such as 0.5*x**2 and can widen the
        printed precision of the leaves.
        """
        if isinstance(expr, sp.Float):
            return sp.Float(f"{float(expr):.{self.decimals}f}")
        if expr.args:
            return expr.func(*[self._round_floats(a) for a in expr.args])
        return expr

    def _wrap(self, expr: sp.Basic, variable: str) -> str:
        if self.approx:
            expr = self._round_floats(expr)
        return f"$$f({variable}) = {sp.latex(expr)}$$"
