import time
from typing import Callable, Optional

from config import logger
from heuristics import HeuristicScorer
from models import AnalysisResult, Assessed, FAILURE_SUMMARY
from store import AnalysisCache, ReportStore
from .remote_assessor import RemoteAssessor


class AnalysisPipeline:
    """
    Produces a credibility assessment for a submission and records it on its report.

    Order of preference: cached remote result, fresh remote result, heuristics.
    Each report receives exactly one terminal write, completed or failed.
    """

    def __init__(
        self,
        store: ReportStore,
        assessor: Optional[RemoteAssessor] = None,
        scorer: Optional[HeuristicScorer] = None,
        cache: Optional[AnalysisCache] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.store = store
        self.assessor = assessor
        self.scorer = scorer or HeuristicScorer()
        self.cache = cache
        self._clock = clock

    async def run(self, input_type: str, content: str) -> AnalysisResult:
        """Compute a result without touching the report store."""
        if self.cache is not None:
            cached = await self.cache.get(input_type, content)
            if cached is not None:
                logger.info("Analysis cache hit for %s input.", input_type)
                return cached

        if self.assessor is not None:
            outcome = await self.assessor.assess(input_type, content)
            if isinstance(outcome, Assessed):
                if self.cache is not None:
                    await self.cache.put(input_type, content, outcome.result)
                return outcome.result
            logger.info("Remote assessment unavailable (%s); using heuristics.", outcome.reason)

        return self.scorer.score(input_type, content)

    async def analyze_report(self, report_id: str, input_type: str, content: str) -> bool:
        """
        Analyse content and write the outcome to report_id.
        Returns:
            True if the report was completed, False if it was marked failed
        """
        start = self._clock()
        try:
            result = await self.run(input_type, content)
            result = result.model_copy(update={"processing_time": self._elapsed_ms(start)})
            await self.store.update(report_id, result.model_dump(), status="completed")
            logger.info(
                "Report %s completed: score=%d in %dms",
                report_id, result.credibility_score, result.processing_time,
                extra={"report_id": report_id, "input_type": input_type}
            )
            return True
        except Exception:
            logger.exception("Analysis failed for report %s", report_id)

        failure = {
            "credibility_score": 0,
            "flagged_claims": [],
            "verified_sources": [],
            "summary": FAILURE_SUMMARY,
            "processing_time": self._elapsed_ms(start),
        }
        try:
            await self.store.update(report_id, failure, status="failed")
        except Exception:
            logger.exception("Could not record failure for report %s", report_id)
        return False

    def _elapsed_ms(self, start: float) -> int:
        return max(0, int((self._clock() - start) * 1000))
