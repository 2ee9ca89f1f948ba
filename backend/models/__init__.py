from .results import (
    INPUT_TYPES,
    MEDIA_TYPES,
    DEEPFAKE_STATUSES,
    InputType,
    DeepfakeStatus,
    FlaggedClaim,
    VerifiedSource,
    ConfidenceBreakdown,
    AnalysisResult,
)
from .assessment import Assessed, Unavailable, AssessmentOutcome
from .reports import (
    FAILURE_SUMMARY,
    TERMINAL_STATUSES,
    ReportStatus,
    Report,
    AnalysisRequest,
    ReportCreated,
)

__all__ = [
    "INPUT_TYPES",
    "MEDIA_TYPES",
    "DEEPFAKE_STATUSES",
    "InputType",
    "DeepfakeStatus",
    "FlaggedClaim",
    "VerifiedSource",
    "ConfidenceBreakdown",
    "AnalysisResult",

    "Assessed",
    "Unavailable",
    "AssessmentOutcome",

    "FAILURE_SUMMARY",
    "TERMINAL_STATUSES",
    "ReportStatus",
    "Report",
    "AnalysisRequest",
    "ReportCreated",
]
