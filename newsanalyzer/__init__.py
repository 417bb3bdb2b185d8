# newsanalyzer/__init__.py
from newsanalyzer.errors import (
    AnalysisFailure,
    AnalyzerError,
    InputTooShort,
    RequestError,
    ValidationError,
)
from newsanalyzer.models import AnalysisResult, Band

__all__ = [
    "AnalysisFailure",
    "AnalysisResult",
    "AnalyzerError",
    "Band",
    "InputTooShort",
    "RequestError",
    "ValidationError",
]

__version__ = "0.1.0"
