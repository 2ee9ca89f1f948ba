import pytest
import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))

# Tests never reach the real remote service.
os.environ.pop("OPENROUTER_API_KEY", None)


class FakeClock:
    """Manually advanced clock for time-dependent components."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def report_store():
    from store import InMemoryReportStore
    return InMemoryReportStore()


@pytest.fixture
def offline_pipeline(report_store):
    """Pipeline with no remote assessor configured."""
    from services import AnalysisPipeline, RemoteAssessor
    return AnalysisPipeline(store=report_store, assessor=RemoteAssessor(api_key=None))


@pytest.fixture
def test_client(report_store, offline_pipeline):
    """TestClient with store and pipeline swapped for per-test instances."""
    from fastapi.testclient import TestClient
    import main

    main.app.dependency_overrides[main.get_report_store] = lambda: report_store
    main.app.dependency_overrides[main.get_pipeline] = lambda: offline_pipeline
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()


@pytest.fixture
def sample_assessment():
    """A canonical assessment payload as the remote model would return it."""
    return {
        "credibilityScore": 72,
        "deepfakeStatus": None,
        "flaggedClaims": [
            {"claim": "Unsourced statistic", "confidence": 0.5, "sources": ["Pattern Analysis"]}
        ],
        "verifiedSources": [
            {"title": "Reuters", "url": "https://www.reuters.com/", "credibility": 0.75}
        ],
        "summary": "Mostly credible with one unsourced statistic.",
        "confidenceBreakdown": {"trusted": 0.5, "neutral": 0.25, "suspicious": 0.25},
        "explainability": "One numeric claim lacks attribution.",
        "recommendations": ["Check the original dataset"],
        "frameFindings": [],
    }


@pytest.fixture
def completion_envelope():
    """Build a chat-completion response body around a message content string."""
    def build(content):
        return {"choices": [{"message": {"role": "assistant", "content": content}}]}
    return build


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.AsyncClient usable as an async context manager."""
    mock_client = MagicMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.fixture
def json_response():
    """Build a mock httpx response returning the given JSON body."""
    def build(body, status_code: int = 200):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = body
        response.raise_for_status = MagicMock()
        return response
    return build
