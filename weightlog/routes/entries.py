from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from ..application.entries import (
    CreateSampleUseCase,
    DeleteSampleUseCase,
    DuplicateSampleError,
    ExportSamplesUseCase,
    ImportSamplesUseCase,
    ListSamplesUseCase,
    SampleNotFoundError,
    UpdateSampleUseCase,
)
from ..domain.weight.normalize import DateOrder
from ..models.responses import OperationStatus
from ..models.samples import (
    ImportSummary,
    WeightSample,
    WeightSampleCreate,
    WeightSampleUpdate,
)
from ..platform.config import Settings, get_settings
from ..platform.security import current_user_id
from ..platform.wiring import (
    get_create_sample_use_case,
    get_delete_sample_use_case,
    get_export_samples_use_case,
    get_import_samples_use_case,
    get_list_samples_use_case,
    get_update_sample_use_case,
)
from .utils import date_order_query, end_date_query, resolve_date_order, start_date_query

router: APIRouter = APIRouter()


@router.get("/weight-entries", response_model=List[WeightSample])
async def list_weight_entries(
    start_date: Optional[date] = start_date_query,
    end_date: Optional[date] = end_date_query,
    user_id: str = Depends(current_user_id),
    use_case: ListSamplesUseCase = Depends(get_list_samples_use_case),
) -> List[WeightSample]:
    """List weight entries, newest first."""
    return await use_case(user_id, start_date, end_date)


@router.post("/weight-entries", status_code=201, response_model=OperationStatus)
async def create_weight_entry(
    sample: WeightSampleCreate,
    user_id: str = Depends(current_user_id),
    use_case: CreateSampleUseCase = Depends(get_create_sample_use_case),
) -> OperationStatus:
    try:
        return await use_case(user_id, sample)
    except DuplicateSampleError as exc:
        raise HTTPException(status_code=409, detail={"error": str(exc)}) from exc


@router.get(
    "/weight-entries/export",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}},
)
async def export_weight_entries(
    user_id: str = Depends(current_user_id),
    use_case: ExportSamplesUseCase = Depends(get_export_samples_use_case),
) -> Response:
    """Download all entries as ``Date,Weight (kg)`` CSV, oldest first."""
    content = await use_case(user_id)
    filename = f"weight-data-{date.today().isoformat()}.csv"
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post(
    "/weight-entries/import",
    response_model=ImportSummary,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"text/csv": {"schema": {"type": "string"}}},
        }
    },
)
async def import_weight_entries(
    request: Request,
    date_order: Optional[DateOrder] = date_order_query,
    user_id: str = Depends(current_user_id),
    settings: Settings = Depends(get_settings),
    use_case: ImportSamplesUseCase = Depends(get_import_samples_use_case),
) -> ImportSummary:
    """Merge CSV rows into the log. Dates that already have an entry are kept as is."""
    raw = await request.body()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise HTTPException(
            status_code=400, detail={"error": "CSV body must be UTF-8 text"}
        ) from exc
    order = resolve_date_order(date_order, settings.csv_date_order)
    return await use_case(user_id, text, order)


@router.patch("/weight-entries/{entry_id}", response_model=WeightSample)
async def update_weight_entry(
    entry_id: str,
    changes: WeightSampleUpdate,
    user_id: str = Depends(current_user_id),
    use_case: UpdateSampleUseCase = Depends(get_update_sample_use_case),
) -> WeightSample:
    try:
        return await use_case(user_id, entry_id, changes)
    except SampleNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Entry not found"}) from exc
    except DuplicateSampleError as exc:
        raise HTTPException(status_code=409, detail={"error": str(exc)}) from exc


@router.delete("/weight-entries/{entry_id}", response_model=OperationStatus)
async def delete_weight_entry(
    entry_id: str,
    user_id: str = Depends(current_user_id),
    use_case: DeleteSampleUseCase = Depends(get_delete_sample_use_case),
) -> OperationStatus:
    try:
        return await use_case(user_id, entry_id)
    except SampleNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Entry not found"}) from exc
