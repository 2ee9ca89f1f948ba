from typing import List, Literal, Optional
from pydantic import ConfigDict, Field

from .results import (
    CamelModel,
    ConfidenceBreakdown,
    DeepfakeStatus,
    FlaggedClaim,
    InputType,
    VerifiedSource,
)

ReportStatus = Literal["processing", "completed", "failed"]
TERMINAL_STATUSES = ("completed", "failed")

FAILURE_SUMMARY = "Analysis failed due to technical error"


class Report(CamelModel):
    """A submitted analysis and its lifecycle state."""
    id: str
    owner_id: Optional[str] = None
    input_type: InputType
    input_content: str
    status: ReportStatus = "processing"
    created_at: float

    credibility_score: int = Field(default=0, ge=0, le=100)
    deepfake_status: Optional[DeepfakeStatus] = None
    flagged_claims: List[FlaggedClaim] = []
    verified_sources: List[VerifiedSource] = []
    summary: str = ""
    confidence_breakdown: ConfidenceBreakdown = ConfidenceBreakdown(trusted=0.0, neutral=0.0, suspicious=0.0)
    explainability: str = ""
    recommendations: List[str] = []
    frame_findings: List[str] = []
    processing_time: int = Field(default=0, ge=0)


class AnalysisRequest(CamelModel):
    input_type: InputType
    content: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "inputType": "url",
                "content": "https://www.bbc.com/news/world"
            }
        }
    )


class ReportCreated(CamelModel):
    report_id: str
    status: ReportStatus
