from typing import Any, Dict, List, Mapping, Optional

from config import COERCION_DEFAULTS
from models import (
    DEEPFAKE_STATUSES,
    AnalysisResult,
    ConfidenceBreakdown,
    FlaggedClaim,
    VerifiedSource,
)
from utils.parsing import coerce_number

_SUM_TOLERANCE = 1e-9


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _text(value: Any, default: str = "") -> str:
    return default if value is None else str(value)


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]


def coerce_deepfake_status(value: Any) -> Optional[str]:
    if not value:
        return None
    status = str(value).lower()
    return status if status in DEEPFAKE_STATUSES else None


def coerce_flagged_claims(value: Any) -> List[FlaggedClaim]:
    if not isinstance(value, list):
        return []
    claims = []
    for item in value:
        item = _mapping(item)
        claims.append(FlaggedClaim(
            claim=_text(item.get("claim")),
            confidence=coerce_number(item.get("confidence"), 0.0, 1.0, COERCION_DEFAULTS.CLAIM_CONFIDENCE),
            sources=_string_list(item.get("sources")),
        ))
    return claims


def coerce_verified_sources(value: Any) -> List[VerifiedSource]:
    if not isinstance(value, list):
        return []
    sources = []
    for item in value:
        item = _mapping(item)
        sources.append(VerifiedSource(
            title=_text(item.get("title"), COERCION_DEFAULTS.SOURCE_TITLE),
            url=_text(item.get("url")),
            credibility=coerce_number(item.get("credibility"), 0.0, 1.0, COERCION_DEFAULTS.SOURCE_CREDIBILITY),
        ))
    return sources


def coerce_confidence_breakdown(value: Any) -> ConfidenceBreakdown:
    """Clamp each share independently, then renormalise so the three sum to 1.

    A split that already sums to 1 is returned unchanged, so coercing a
    coerced breakdown is a no-op.
    """
    raw = _mapping(value)
    trusted = coerce_number(raw.get("trusted"), 0.0, 1.0, COERCION_DEFAULTS.TRUSTED)
    neutral = coerce_number(raw.get("neutral"), 0.0, 1.0, COERCION_DEFAULTS.NEUTRAL)
    suspicious = coerce_number(raw.get("suspicious"), 0.0, 1.0, COERCION_DEFAULTS.SUSPICIOUS)
    total = trusted + neutral + suspicious
    if total == 0:
        # An all-zero split carries no information; use the default mix.
        trusted, neutral, suspicious = (
            COERCION_DEFAULTS.TRUSTED, COERCION_DEFAULTS.NEUTRAL, COERCION_DEFAULTS.SUSPICIOUS
        )
        total = trusted + neutral + suspicious
    if abs(total - 1.0) <= _SUM_TOLERANCE:
        return ConfidenceBreakdown(trusted=trusted, neutral=neutral, suspicious=suspicious)
    return ConfidenceBreakdown(
        trusted=trusted / total,
        neutral=neutral / total,
        suspicious=suspicious / total,
    )


def coerce_result(payload: Any) -> AnalysisResult:
    """
    Map an untyped remote payload onto a well-formed AnalysisResult.
    Never raises: every field falls back to a default and is clamped to its range.
    """
    data: Mapping[str, Any] = _mapping(payload)
    score = coerce_number(data.get("credibilityScore"), 0, 100, COERCION_DEFAULTS.SCORE)
    summary = _text(data.get("summary")) or COERCION_DEFAULTS.SUMMARY

    return AnalysisResult(
        credibility_score=int(round(score)),
        deepfake_status=coerce_deepfake_status(data.get("deepfakeStatus")),
        flagged_claims=coerce_flagged_claims(data.get("flaggedClaims")),
        verified_sources=coerce_verified_sources(data.get("verifiedSources")),
        summary=summary,
        confidence_breakdown=coerce_confidence_breakdown(data.get("confidenceBreakdown")),
        explainability=_text(data.get("explainability")),
        recommendations=_string_list(data.get("recommendations")),
        frame_findings=_string_list(data.get("frameFindings")),
    )


def result_payload(result: AnalysisResult) -> Dict[str, Any]:
    """Wire form of a result, as a remote assessor would return it."""
    return result.model_dump(by_alias=True, exclude={"processing_time"})
