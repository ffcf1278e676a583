import io

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from benford_analyzer.analysis.errors import BenfordAnalysisError
from benford_analyzer.schemas.analysis import AnalysisRunRequest, AnalysisResponse
from benford_analyzer.services.analysis_service import AnalysisService

router = APIRouter(prefix="/analyses", tags=["analyses"])


@router.post("/run", response_model=AnalysisResponse)
async def run_analysis(request: AnalysisRunRequest):
    service = AnalysisService()
    try:
        outcome = service.run_analysis(request.raw_input, request.threshold)
    except BenfordAnalysisError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())
    return service.to_response(outcome)


@router.post("/export.csv")
async def export_analysis_csv(request: AnalysisRunRequest):
    service = AnalysisService()
    try:
        outcome = service.run_analysis(request.raw_input, request.threshold)
    except BenfordAnalysisError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())

    csv_content = service.export_to_csv(outcome)

    return StreamingResponse(
        io.StringIO(csv_content),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=benford_analysis_results.csv"},
    )
