"""
Least-squares polynomial fitting via Gauss-Jordan elimination of the normal
equations.

    pf = Polyfit([-1, 0, 1, 2, 3, 5, 7, 9], [-1, 3, 2.5, 5, 4, 2, 5, 4])
    terms = pf.compute_coefficients(6)
    pf.correlation_coefficient(terms)     # squared Pearson r of the fit
    pf.standard_error(terms)
    pf.to_expression(6)                   # "2.6937037085228717 + 0.958...x^1 + ..."

x and y must share one representation: Python lists/tuples, or numpy arrays
of the same float dtype. Coefficient vectors come back in that representation,
lowest power first.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable, Optional

from polyfit import gauss_jordan
from polyfit import metrics
from polyfit.exceptions import ConfigurationError
from polyfit.latex_gen import LatexGenerator
from polyfit.normal_equations import solve_normal_equations
from polyfit.samples import SampleSet, Vector, new_vector

logger = logging.getLogger(__name__)

Evaluator = Callable[[float], float]


# ===========================================================================
# Data-classes
# ===========================================================================

@dataclass(frozen=True, slots=True)
class FitSettings:
    target_correlation: float = 0.9   # default threshold for compute_best_fit
    variable: str = "x"               # name used in rendered expressions
    latex_approx: bool = True         # decimal approximations in LaTeX output
    latex_decimals: int = 3           # digits after decimal point when approx is on

    def __post_init__(self) -> None:
        if isinstance(self.target_correlation, bool) or not isinstance(
                self.target_correlation, numbers.Real):
            raise ConfigurationError(
                f"target_correlation must be a number, got {self.target_correlation!r}")
        if not (0.0 <= self.target_correlation <= 1.0):
            raise ConfigurationError(
                f"target_correlation must be in [0, 1], got {self.target_correlation}")
        if not isinstance(self.variable, str) or not self.variable.isidentifier():
            raise ConfigurationError(f"variable must be an identifier, got {self.variable!r}")
        if isinstance(self.latex_decimals, bool) or not isinstance(self.latex_decimals, int):
            raise ConfigurationError(
                f"latex_decimals must be an integer, got {self.latex_decimals!r}")
        if not (0 <= self.latex_decimals <= 10):
            raise ConfigurationError(
                f"latex_decimals must be in [0, 10], got {self.latex_decimals}")


@dataclass(frozen=True, slots=True)
class FitResult:
    degree: int
    coefficients: Vector
    correlation: float
    standard_error: float
    evaluate: Evaluator
    variable: str = "x"

    @property
    def expression(self) -> str:
        return render_expression(self.coefficients, self.variable)


def render_expression(terms: Sequence[Any], variable: str = "x") -> str:
    """Join coefficients as ``c0 + c1x^1 + c2x^2 ...`` using shortest float repr."""
    if len(terms) == 0:
        return ""
    parts = [repr(float(terms[0]))]
    for i in range(1, len(terms)):
        parts.append(f"{float(terms[i])!r}{variable}^{i}")
    return " + ".join(parts)


def check_degree(degree: Any, minimum: int = 0, name: str = "degree") -> int:
    """Return *degree* as an int, or raise ConfigurationError."""
    if isinstance(degree, bool):
        raise ConfigurationError(f"{name} must be an integer, got {degree!r}")
    if isinstance(degree, numbers.Integral):
        value = int(degree)
    elif isinstance(degree, numbers.Real) and float(degree).is_integer():
        value = int(degree)
    else:
        raise ConfigurationError(f"{name} must be an integer, got {degree!r}")
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


# ===========================================================================
# Fit session
# ===========================================================================

class Polyfit:
    """Polynomial fitting session over one immutable sample set."""

    gauss_jordan_divide = staticmethod(gauss_jordan.divide_row)
    gauss_jordan_eliminate = staticmethod(gauss_jordan.eliminate)
    gauss_jordan_echelonize = staticmethod(gauss_jordan.echelonize)
    regress = staticmethod(metrics.regress)

    def __init__(self, x: Any, y: Any, settings: Optional[FitSettings] = None) -> None:
        self._samples = SampleSet.from_sequences(x, y)
        self._settings = settings or FitSettings()
        self._latex_gen = LatexGenerator(self._settings.latex_approx,
                                         self._settings.latex_decimals)

    @property
    def samples(self) -> SampleSet:
        return self._samples

    @property
    def settings(self) -> FitSettings:
        return self._settings

    def compute_coefficients(self, degree: int) -> Vector:
        """Least-squares coefficients of a polynomial of *degree*, lowest power first."""
        degree = check_degree(degree)
        return solve_normal_equations(self._samples, degree)

    def correlation_coefficient(self, terms: Sequence[Any]) -> float:
        return metrics.correlation_coefficient(self._samples, terms)

    def standard_error(self, terms: Sequence[Any]) -> float:
        return metrics.standard_error(self._samples, terms)

    def compute_best_fit(
        self, max_degree: int, target_correlation: Optional[float] = None
    ) -> Vector:
        """Coefficients of the lowest degree in 1..max_degree whose correlation
        strictly exceeds *target_correlation*; an empty vector when none does.
        """
        max_degree = check_degree(max_degree, minimum=1, name="max_degree")
        if target_correlation is None:
            target_correlation = self._settings.target_correlation

        for degree in range(1, max_degree + 1):
            terms = self.compute_coefficients(degree)
            correlation = self.correlation_coefficient(terms)
            logger.debug("degree %d: correlation %r", degree, correlation)
            if correlation > target_correlation:
                return terms

        logger.debug("no degree up to %d exceeds correlation %r", max_degree, target_correlation)
        return new_vector(self._samples.kind, 0)

    def get_polynomial(self, degree: int) -> Evaluator:
        """Return f(x) evaluating the polynomial of *degree* fitted to the samples."""
        terms = self.compute_coefficients(degree)

        def evaluate(x: float) -> float:
            return metrics.regress(x, terms)

        return evaluate

    def to_expression(self, degree: int) -> str:
        return render_expression(self.compute_coefficients(degree), self._settings.variable)

    def to_latex(self, degree: int) -> str:
        return self._latex_gen.generate(self.compute_coefficients(degree),
                                        self._settings.variable)

    def fit(self, degree: int) -> FitResult:
        degree = check_degree(degree)
        terms = self.compute_coefficients(degree)
        return self._result(degree, terms)

    def best_fit(
        self, max_degree: int, target_correlation: Optional[float] = None
    ) -> Optional[FitResult]:
        terms = self.compute_best_fit(max_degree, target_correlation)
        if len(terms) == 0:
            return None
        return self._result(len(terms) - 1, terms)

    def _result(self, degree: int, terms: Vector) -> FitResult:
        return FitResult(
            degree=degree,
            coefficients=terms,
            correlation=self.correlation_coefficient(terms),
            standard_error=self.standard_error(terms),
            evaluate=lambda x: metrics.regress(x, terms),
            variable=self._settings.variable,
        )
