from polyfit.exceptions import ConfigurationError
from polyfit.fitting import FitResult, FitSettings, Polyfit
from polyfit.latex_gen import LatexGenerator
from polyfit.samples import SampleKind, SampleSet

__all__ = [
    "ConfigurationError",
    "FitResult",
    "FitSettings",
    "LatexGenerator",
    "Polyfit",
    "SampleKind",
    "SampleSet",
]
