from __future__ import annotations

from datetime import date
from typing import Any
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from fastapi.responses import Response

from rollshop.api.v1.schemas import (
    ImportResponseSchema, RecordsResponseSchema, StaffStatSchema,
    WinnerSummarySchema, record_view_schema,
)
from rollshop.application.exceptions import RecordImportError, RecordStoreError
from rollshop.application.ports.record_store import RecordStorePort
from rollshop.application.use_cases.backup import ExportRecordsUseCase, ImportRecordsUseCase
from rollshop.application.use_cases.record_views import filter_records_for_view
from rollshop.application.use_cases.staff_stats import aggregate_staff_stats, build_staff_export_table
from rollshop.application.use_cases.winner_summary import summarize_winners
from rollshop.application.utils.csv_export import export_filename, render_csv
from rollshop.core.config import settings
from rollshop.domain.entities.record_view import Role
from rollshop.domain.entities.transaction_record import TransactionRecord
from rollshop.wiring.dependencies import (
    get_business_timezone,
    get_export_records_use_case,
    get_import_records_use_case,
    get_record_store,
)

router = APIRouter()


def _load(store: RecordStorePort) -> list[TransactionRecord]:
    try:
        return store.get_all()
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/records", response_model=RecordsResponseSchema)
def list_records(
    role: Role = Query(Role.GUEST),
    viewer_id: str | None = Query(None),
    store: RecordStorePort = Depends(get_record_store),
    tz: ZoneInfo = Depends(get_business_timezone),
):
    views = filter_records_for_view(_load(store), role, viewer_id, tz)
    return RecordsResponseSchema(items=[record_view_schema(v) for v in views])


@router.get("/stats", response_model=list[StaffStatSchema])
def staff_stats(store: RecordStorePort = Depends(get_record_store)):
    stats = aggregate_staff_stats(_load(store), salary_rate=settings.SALARY_RATE)
    return [StaffStatSchema.from_entity(s) for s in stats]


@router.get("/stats/export")
def export_staff_stats(store: RecordStorePort = Depends(get_record_store)) -> Response:
    records = _load(store)
    if not records:
        raise HTTPException(status_code=404, detail="No records to export")
    table = build_staff_export_table(aggregate_staff_stats(records, salary_rate=settings.SALARY_RATE))
    return Response(
        content=render_csv(table).encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(date.today())}"'},
    )


@router.get("/winners", response_model=list[WinnerSummarySchema])
def winners(store: RecordStorePort = Depends(get_record_store)):
    return [WinnerSummarySchema.from_entity(s) for s in summarize_winners(_load(store))]


@router.get("/backup")
def export_backup(uc: ExportRecordsUseCase = Depends(get_export_records_use_case)) -> dict[str, Any]:
    try:
        return uc.execute()
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/backup", response_model=ImportResponseSchema)
def import_backup(
    payload: Any = Body(...),
    uc: ImportRecordsUseCase = Depends(get_import_records_use_case),
):
    try:
        imported = uc.execute(payload)
    except RecordImportError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return ImportResponseSchema(imported=imported)
