# newsanalyzer/errors.py
"""Exception hierarchy for the analyzer.

Every failure the UI can recover from derives from ``AnalyzerError``:

* ``ValidationError`` is raised before any request is made.
* ``RequestError`` covers everything that can go wrong talking to the
  completion endpoint or reading its answer.
"""

VALIDATION_MESSAGE = "Please enter a longer text to analyze"
FAILURE_MESSAGE = "Error analyzing text. Please try again."


class AnalyzerError(Exception):
    user_message = FAILURE_MESSAGE


class ValidationError(AnalyzerError):
    user_message = VALIDATION_MESSAGE


class InputTooShort(ValidationError):
    def __init__(self, length: int, minimum: int):
        super().__init__(f"input has {length} characters, need at least {minimum}")
        self.length = length
        self.minimum = minimum


class RequestError(AnalyzerError):
    user_message = FAILURE_MESSAGE


class AnalysisFailure(RequestError):
    pass
