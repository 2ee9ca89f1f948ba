from .text_heuristics import TextHeuristics
from .url_heuristics import UrlHeuristics, extract_domain
from .media_heuristics import MediaHeuristics
from .scorer import HeuristicScorer, score_text, score_url, score_media

__all__ = [
    "TextHeuristics",
    "UrlHeuristics",
    "MediaHeuristics",
    "HeuristicScorer",
    "extract_domain",
    "score_text",
    "score_url",
    "score_media",
]
