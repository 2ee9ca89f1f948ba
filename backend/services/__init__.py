from .llm import call_openrouter
from .coercion import coerce_result, result_payload
from .remote_assessor import RemoteAssessor
from .pipeline import AnalysisPipeline

__all__ = [
    "call_openrouter",
    "coerce_result",
    "result_payload",
    "RemoteAssessor",
    "AnalysisPipeline",
]
