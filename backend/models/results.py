from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

InputType = Literal["text", "url", "image", "video"]
DeepfakeStatus = Literal["real", "fake", "uncertain"]

INPUT_TYPES = ("text", "url", "image", "video")
MEDIA_TYPES = ("image", "video")
DEEPFAKE_STATUSES = ("real", "fake", "uncertain")


class CamelModel(BaseModel):
    """Python field names, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class FlaggedClaim(CamelModel):
    claim: str
    confidence: float = Field(ge=0.0, le=1.0)
    sources: List[str] = []


class VerifiedSource(CamelModel):
    title: str
    url: str
    credibility: float = Field(ge=0.0, le=1.0)


class ConfidenceBreakdown(CamelModel):
    trusted: float = Field(ge=0.0, le=1.0)
    neutral: float = Field(ge=0.0, le=1.0)
    suspicious: float = Field(ge=0.0, le=1.0)

    @property
    def total(self) -> float:
        return self.trusted + self.neutral + self.suspicious


class AnalysisResult(CamelModel):
    """Credibility assessment produced once per analysis request."""
    credibility_score: int = Field(ge=0, le=100)
    deepfake_status: Optional[DeepfakeStatus] = None
    flagged_claims: List[FlaggedClaim] = []
    verified_sources: List[VerifiedSource] = []
    summary: str = Field(min_length=1)
    confidence_breakdown: ConfidenceBreakdown
    explainability: str = ""
    recommendations: List[str] = []
    frame_findings: List[str] = []
    processing_time: int = Field(default=0, ge=0)
