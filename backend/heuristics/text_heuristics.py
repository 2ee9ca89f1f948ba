from config.constants import TEXT_RULES, TextRules
from models import AnalysisResult, ConfidenceBreakdown, FlaggedClaim, VerifiedSource
from utils.parsing import clamp


class TextHeuristics:
    """Scores free text by penalising sensational wording and very short passages."""

    def __init__(self, rules: TextRules = None):
        self.rules = rules or TEXT_RULES

    def score(self, text: str) -> AnalysisResult:
        """
        Score a piece of text.
        Args:
            text: Validated, non-empty text content
        Returns:
            AnalysisResult without deepfake status
        """
        rules = self.rules
        lowered = text.lower()
        score = rules.BASELINE_SCORE
        flagged_claims = []

        for keyword in rules.SUSPICIOUS_KEYWORDS:
            if keyword in lowered:
                score -= rules.KEYWORD_PENALTY
                flagged_claims.append(FlaggedClaim(
                    claim=f'Contains suspicious keyword: "{keyword}"',
                    confidence=rules.KEYWORD_CONFIDENCE,
                    sources=["Pattern Analysis"],
                ))

        if len(text) < rules.MIN_LENGTH:
            score -= rules.SHORT_TEXT_PENALTY
            flagged_claims.append(FlaggedClaim(
                claim="Text too short for reliable analysis",
                confidence=rules.SHORT_TEXT_CONFIDENCE,
                sources=["Length Analysis"],
            ))

        score = int(clamp(score, 0, 100))
        trusted, neutral, suspicious = rules.BREAKDOWN

        return AnalysisResult(
            credibility_score=score,
            flagged_claims=flagged_claims,
            verified_sources=[VerifiedSource(
                title="Fact-checking guidelines",
                url="https://example.com/fact-check",
                credibility=0.9,
            )],
            summary=(
                f"Text analysis completed. Credibility score: {score}/100. "
                f"{len(flagged_claims)} potential issues identified."
            ),
            confidence_breakdown=ConfidenceBreakdown(trusted=trusted, neutral=neutral, suspicious=suspicious),
            explainability="Sensational language detected but no direct claims of falsity.",
            recommendations=["Verify claims with primary sources", "Check for corroborating evidence"],
        )
