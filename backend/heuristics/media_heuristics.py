import random
from typing import Callable

from config.constants import MEDIA_RULES, MediaRules
from models import AnalysisResult, ConfidenceBreakdown, FlaggedClaim, VerifiedSource
from utils.parsing import clamp

# Stand-in for a forensic model: a zero-argument callable returning a value in [0, 1).
ManipulationDraw = Callable[[], float]

FRAME_FINDINGS = {
    "image": "Edge consistency check: Lighting and shadows appear consistent.",
    "video": "Key frame analysis: No obvious face warping artifacts detected.",
}


class MediaHeuristics:
    """Simulated deepfake classification for image and video submissions."""

    def __init__(self, draw: ManipulationDraw = None, rules: MediaRules = None):
        self.draw = draw or random.random
        self.rules = rules or MEDIA_RULES

    def classify(self, manipulation: float) -> str:
        if manipulation > self.rules.FAKE_THRESHOLD:
            return "fake"
        if manipulation > self.rules.UNCERTAIN_THRESHOLD:
            return "uncertain"
        return "real"

    def score(self, content: str, media_type: str) -> AnalysisResult:
        """
        Score an image or video reference.
        Args:
            content: Media reference; descriptive only, not inspected
            media_type: "image" or "video"
        Returns:
            AnalysisResult with deepfake status and frame findings
        """
        rules = self.rules
        manipulation = clamp(float(self.draw()), 0.0, 1.0)
        status = self.classify(manipulation)
        score = {
            "real": rules.SCORE_REAL,
            "uncertain": rules.SCORE_UNCERTAIN,
            "fake": rules.SCORE_FAKE,
        }[status]

        flagged_claims = []
        if status == "fake":
            flagged_claims.append(FlaggedClaim(
                claim="High probability of digital manipulation detected",
                confidence=manipulation,
                sources=["Deepfake Detection AI"],
            ))

        frame_findings = [FRAME_FINDINGS[media_type]] if media_type in FRAME_FINDINGS else []
        trusted, neutral, suspicious = rules.BREAKDOWN

        if status == "fake":
            explainability = "High frequency artifacts and temporal inconsistencies suggest manipulation."
            recommendations = ["Seek original source", "Cross-check with trusted outlets"]
        else:
            explainability = "No strong manipulation indicators; signals consistent across frames."
            recommendations = ["Consider corroborating sources for high-impact claims"]

        return AnalysisResult(
            credibility_score=score,
            deepfake_status=status,
            flagged_claims=flagged_claims,
            verified_sources=[VerifiedSource(
                title="Media verification guidelines",
                url="https://example.com/media-verify",
                credibility=0.9,
            )],
            summary=f"{media_type} analysis completed. Deepfake status: {status}. Credibility score: {score}/100.",
            confidence_breakdown=ConfidenceBreakdown(trusted=trusted, neutral=neutral, suspicious=suspicious),
            explainability=explainability,
            recommendations=recommendations,
            frame_findings=frame_findings,
        )
