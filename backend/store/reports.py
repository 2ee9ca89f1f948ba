import asyncio
import itertools
import time
import uuid
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional

from config import logger
from exceptions import ReportNotFoundException, ReportStateException, ValidationException
from models import Report, ReportStatus, TERMINAL_STATUSES


class ReportStore(ABC):
    """Persistence boundary for analysis reports."""

    @abstractmethod
    async def create(self, input_type: str, content: str, owner_id: Optional[str] = None) -> str:
        ...

    @abstractmethod
    async def update(self, report_id: str, fields: Mapping[str, Any], status: ReportStatus) -> Report:
        """Merge result fields and move the report to a terminal status, exactly once."""

    @abstractmethod
    async def get(self, report_id: str) -> Optional[Report]:
        ...

    @abstractmethod
    async def list_by_status(self, status: ReportStatus, limit: int) -> List[Report]:
        ...

    @abstractmethod
    async def list_by_owner(self, owner_id: str, limit: int) -> List[Report]:
        ...


class InMemoryReportStore(ReportStore):
    def __init__(self, clock: Callable[[], float] = time.time):
        self._reports: Dict[str, Report] = {}
        self._sequence: Dict[str, int] = {}
        self._counter = itertools.count()
        self._clock = clock
        self._lock = asyncio.Lock()

    async def create(self, input_type: str, content: str, owner_id: Optional[str] = None) -> str:
        report_id = uuid.uuid4().hex
        report = Report(
            id=report_id,
            owner_id=owner_id,
            input_type=input_type,
            input_content=content,
            status="processing",
            created_at=self._clock(),
        )
        async with self._lock:
            self._reports[report_id] = report
            self._sequence[report_id] = next(self._counter)
        logger.info("Report %s created for %s input", report_id, input_type, extra={"report_id": report_id})
        return report_id

    async def update(self, report_id: str, fields: Mapping[str, Any], status: ReportStatus) -> Report:
        if status not in TERMINAL_STATUSES:
            raise ValidationException("status", f"'{status}' is not a terminal status")

        async with self._lock:
            current = self._reports.get(report_id)
            if current is None:
                raise ReportNotFoundException(report_id)
            if current.status != "processing":
                raise ReportStateException(report_id, current.status)

            merged = current.model_dump()
            merged.update({k: v for k, v in fields.items() if k not in ("id", "owner_id", "created_at")})
            merged["status"] = status
            updated = Report.model_validate(merged)
            self._reports[report_id] = updated
        return updated

    async def get(self, report_id: str) -> Optional[Report]:
        return self._reports.get(report_id)

    async def list_by_status(self, status: ReportStatus, limit: int) -> List[Report]:
        return self._newest(lambda r: r.status == status, limit)

    async def list_by_owner(self, owner_id: str, limit: int) -> List[Report]:
        return self._newest(lambda r: r.owner_id == owner_id, limit)

    def _newest(self, predicate: Callable[[Report], bool], limit: int) -> List[Report]:
        matches = [r for r in self._reports.values() if predicate(r)]
        matches.sort(key=lambda r: self._sequence[r.id], reverse=True)
        return matches[:max(0, limit)]
