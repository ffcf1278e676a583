import io

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from benford_analyzer.analysis.errors import BenfordAnalysisError
from benford_analyzer.schemas.generator import GenerateRequest, GenerateResponse
from benford_analyzer.services.generator_service import GeneratorService

router = APIRouter(prefix="/generate", tags=["generate"])


@router.post("", response_model=GenerateResponse)
async def generate_test_data(request: GenerateRequest):
    """Generate Benford-conforming numbers via inverse-transform sampling."""
    service = GeneratorService()
    try:
        return service.generate(request)
    except BenfordAnalysisError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())


@router.post("/download.csv")
async def download_test_data(request: GenerateRequest):
    service = GeneratorService()
    try:
        generated = service.generate(request)
    except BenfordAnalysisError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())

    return StreamingResponse(
        io.StringIO(service.export_to_csv(generated.values)),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=benford_test_data.csv"},
    )
