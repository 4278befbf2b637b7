import numpy as np

from polyfit.latex_gen import LatexGenerator


def test_exact_mode_uses_fractions():
    out = LatexGenerator(approx=False).generate([0.5, 2.0])
    assert out == r"$$f(x) = 2 x + \frac{1}{2}$$"


def test_exact_mode_drops_zero_terms():
    out = LatexGenerator(approx=False).generate([0.0, 0.0, 3.0])
    assert out == "$$f(x) = 3 x^{2}$$"


def test_approx_mode_rounds_coefficients():
    out = LatexGenerator(approx=True, decimals=2).generate([1.0, 0.0, 0.254])
    assert out.startswith("$$f(x) = ")
    assert out.endswith("$$")
    assert "x^{2}" in out
    assert "0.25" in out
    assert "0.254" not in out


def test_accepts_float32_coefficients_and_variable():
    out = LatexGenerator(approx=False).generate(np.array([1.0, 2.0], dtype=np.float32), "t")
    assert out == "$$f(t) = 2 t + 1$$"


def test_reconfigure_clamps_decimals():
    gen = LatexGenerator()
    gen.reconfigure(False, 42)
    assert gen.approx is False
    assert gen.decimals == 10
    gen.reconfigure(True, -3)
    assert gen.decimals == 0
