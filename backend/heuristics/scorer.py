from config import logger
from models import AnalysisResult, MEDIA_TYPES
from .text_heuristics import TextHeuristics
from .url_heuristics import UrlHeuristics
from .media_heuristics import MediaHeuristics


class HeuristicScorer:
    """Offline fallback: routes content to the rule set for its input type."""

    def __init__(
        self,
        text_heuristics: TextHeuristics = None,
        url_heuristics: UrlHeuristics = None,
        media_heuristics: MediaHeuristics = None
    ):
        self.text_heuristics = text_heuristics or TextHeuristics()
        self.url_heuristics = url_heuristics or UrlHeuristics()
        self.media_heuristics = media_heuristics or MediaHeuristics()

    def score(self, input_type: str, content: str) -> AnalysisResult:
        if input_type == "text":
            result = self.text_heuristics.score(content)
        elif input_type == "url":
            result = self.url_heuristics.score(content)
        elif input_type in MEDIA_TYPES:
            result = self.media_heuristics.score(content, input_type)
        else:
            raise ValueError(f"Unsupported input type: {input_type}")

        logger.info(
            "Heuristic %s analysis: score=%d, flagged=%d",
            input_type, result.credibility_score, len(result.flagged_claims)
        )
        return result


def score_text(text: str) -> AnalysisResult:
    return TextHeuristics().score(text)


def score_url(url: str) -> AnalysisResult:
    return UrlHeuristics().score(url)


def score_media(content: str, media_type: str, draw=None) -> AnalysisResult:
    return MediaHeuristics(draw=draw).score(content, media_type)
