from typing import List, Optional
from fastapi import BackgroundTasks, Depends, FastAPI, Header, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import VALIDATION_LIMITS, check_api_keys_on_startup, settings
from exceptions import ReportNotFoundException, VeritraceException
from middleware import RequestContextMiddleware, get_request_id
from models import AnalysisRequest, Report, ReportCreated, ReportStatus
from services import AnalysisPipeline, RemoteAssessor
from store import AnalysisCache, InMemoryReportStore, ReportStore
from utils.validation import InputValidator

app = FastAPI(title="Veritrace API")

@app.on_event("startup")
async def startup_event():
    check_api_keys_on_startup()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestContextMiddleware)

report_store = InMemoryReportStore()
analysis_cache = AnalysisCache(ttl_seconds=settings.ANALYSIS_CACHE_TTL_SECONDS)
remote_assessor = RemoteAssessor.from_settings()
pipeline = AnalysisPipeline(
    store=report_store,
    assessor=remote_assessor,
    cache=analysis_cache if settings.ANALYSIS_CACHE_ENABLED else None,
)


def get_report_store() -> ReportStore:
    return report_store


def get_pipeline() -> AnalysisPipeline:
    return pipeline


@app.exception_handler(VeritraceException)
async def veritrace_exception_handler(request: Request, exc: VeritraceException):
    body = exc.to_dict()
    body["request_id"] = get_request_id()
    return JSONResponse(status_code=exc.status_code, content=body)


@app.get("/")
async def health_check():
    return {
        "status": "ok",
        "message": "Veritrace API is running.",
        "remote_assessor": "configured" if remote_assessor.configured else "fallback-only",
    }


@app.post("/reports", response_model=ReportCreated, status_code=202)
async def submit_report(
    req: AnalysisRequest,
    background_tasks: BackgroundTasks,
    x_user_id: Optional[str] = Header(default=None),
    store: ReportStore = Depends(get_report_store),
    analysis: AnalysisPipeline = Depends(get_pipeline),
):
    """Create a report in processing state and analyse it in the background."""
    content = InputValidator.sanitize_content(req.input_type, req.content)
    report_id = await store.create(req.input_type, content, owner_id=x_user_id)
    background_tasks.add_task(analysis.analyze_report, report_id, req.input_type, content)
    return ReportCreated(report_id=report_id, status="processing")


@app.get("/reports/{report_id}", response_model=Report)
async def get_report(report_id: str, store: ReportStore = Depends(get_report_store)):
    report = await store.get(report_id)
    if report is None:
        raise ReportNotFoundException(report_id)
    return report


@app.get("/reports", response_model=List[Report])
async def list_reports(
    status: ReportStatus = "completed",
    limit: int = Query(default=VALIDATION_LIMITS.DEFAULT_RECENT_LIMIT, ge=1, le=VALIDATION_LIMITS.MAX_LIST_LIMIT),
    store: ReportStore = Depends(get_report_store),
):
    return await store.list_by_status(status, limit)


@app.get("/users/{owner_id}/reports", response_model=List[Report])
async def list_user_reports(
    owner_id: str,
    limit: int = Query(default=VALIDATION_LIMITS.DEFAULT_OWNER_LIMIT, ge=1, le=VALIDATION_LIMITS.MAX_LIST_LIMIT),
    store: ReportStore = Depends(get_report_store),
):
    return await store.list_by_owner(owner_id, limit)
