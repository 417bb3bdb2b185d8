# newsanalyzer/state.py
# idle -> loading -> {success, error}; a new submission goes back to loading.
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from newsanalyzer.client import analyze_text
from newsanalyzer.errors import FAILURE_MESSAGE, AnalyzerError, ValidationError
from newsanalyzer.models import AnalysisResult
from newsanalyzer.validator import validate_input

logger = logging.getLogger(__name__)

Analyze = Callable[[str], AnalysisResult]


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class Notification:
    level: str  # "error" | "warning"
    message: str


@dataclass
class AnalyzerState:
    text: str = ""
    status: Status = Status.IDLE
    result: Optional[AnalysisResult] = None
    pending: Optional[str] = None
    notifications: List[Notification] = field(default_factory=list)

    @property
    def loading(self) -> bool:
        return self.status is Status.LOADING

    def set_text(self, text: str) -> None:
        self.text = text or ""

    def notify(self, level: str, message: str) -> None:
        self.notifications.append(Notification(level, message))

    def drain_notifications(self) -> List[Notification]:
        out, self.notifications = self.notifications, []
        return out

    def start(self, text: Optional[str] = None) -> bool:
        """
        Validate the input and move to loading.

        Returns False (and queues the validation toast) when the text is too
        short, or when a request is already in flight.
        """
        if self.loading:
            return False
        if text is not None:
            self.set_text(text)
        try:
            validate_input(self.text)
        except ValidationError as e:
            self.notify("warning", e.user_message)
            return False
        # length is judged on the trimmed text, the model gets it as typed
        self.pending = self.text
        self.status = Status.LOADING
        self.result = None
        return True

    def run(self, analyze: Analyze = analyze_text) -> None:
        """Issue the pending request and settle into success or error."""
        if not self.loading or self.pending is None:
            return
        text, self.pending = self.pending, None
        try:
            self.result = analyze(text)
            self.status = Status.SUCCESS
        except AnalyzerError as e:
            logger.warning("Analysis failed: %s", e)
            self._fail(e.user_message)
        except Exception:
            logger.exception("Unexpected error while analyzing text")
            self._fail(FAILURE_MESSAGE)
        finally:
            if self.loading:
                self.status = Status.ERROR

    def _fail(self, message: str) -> None:
        self.result = None
        self.status = Status.ERROR
        self.notify("error", message)


def submit(state: AnalyzerState, text: str, analyze: Analyze = analyze_text) -> AnalyzerState:
    if state.start(text):
        state.run(analyze)
    return state
