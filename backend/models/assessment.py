from dataclasses import dataclass
from typing import Union

from .results import AnalysisResult


@dataclass(frozen=True)
class Assessed:
    """The remote assessor produced a usable result."""
    result: AnalysisResult


@dataclass(frozen=True)
class Unavailable:
    """No remote result; the caller falls back to heuristics."""
    reason: str


AssessmentOutcome = Union[Assessed, Unavailable]
