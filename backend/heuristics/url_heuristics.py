from urllib.parse import urlparse

from config.constants import URL_RULES, UrlRules
from models import AnalysisResult, ConfidenceBreakdown, FlaggedClaim, VerifiedSource
from utils.parsing import clamp


def extract_domain(url: str) -> str:
    """Hostname of url, or the raw string when it does not parse as an absolute URL."""
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        hostname = None
    return hostname or url


class UrlHeuristics:
    """Scores a URL by the reputation of its domain."""

    def __init__(self, rules: UrlRules = None):
        self.rules = rules or URL_RULES

    def score(self, url: str) -> AnalysisResult:
        rules = self.rules
        domain = extract_domain(url)
        lowered = domain.lower()
        score = rules.BASELINE_SCORE
        flagged_claims = []

        if any(trusted in lowered for trusted in rules.TRUSTED_DOMAINS):
            score += rules.TRUSTED_BONUS
        elif any(suspicious in lowered for suspicious in rules.SUSPICIOUS_DOMAINS):
            score -= rules.SUSPICIOUS_PENALTY
            flagged_claims.append(FlaggedClaim(
                claim="Source from potentially unreliable domain",
                confidence=rules.SUSPICIOUS_CONFIDENCE,
                sources=["Domain Analysis"],
            ))

        score = int(clamp(score, 0, 100))
        trusted, neutral, suspicious = rules.BREAKDOWN

        return AnalysisResult(
            credibility_score=score,
            flagged_claims=flagged_claims,
            verified_sources=[VerifiedSource(
                title="Source verification",
                url="https://example.com/verify",
                credibility=0.85,
            )],
            summary=f"URL analysis completed for {domain}. Credibility score: {score}/100.",
            confidence_breakdown=ConfidenceBreakdown(trusted=trusted, neutral=neutral, suspicious=suspicious),
            explainability="Domain reputation is generally trustworthy, but content quality varies.",
            recommendations=["Cross-reference with multiple sources", "Check for recent updates"],
        )
