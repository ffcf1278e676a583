from fastapi import APIRouter, UploadFile, File, Query, HTTPException

from benford_analyzer.analysis.errors import BenfordAnalysisError
from benford_analyzer.schemas.import_schema import ColumnsResponse, ExtractResponse
from benford_analyzer.services.import_service import ImportService, decode_upload

router = APIRouter(prefix="/imports", tags=["imports"])


@router.post("/columns", response_model=ColumnsResponse)
async def list_csv_columns(file: UploadFile = File(...)):
    service = ImportService()
    content = await file.read()
    try:
        return service.list_columns(decode_upload(content))
    except BenfordAnalysisError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())


@router.post("/extract", response_model=ExtractResponse)
async def extract_csv_column(
    column: int = Query(0, ge=0),
    file: UploadFile = File(...),
):
    service = ImportService()
    content = await file.read()
    try:
        return service.extract_column(decode_upload(content), column)
    except BenfordAnalysisError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())
