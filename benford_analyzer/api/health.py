from fastapi import APIRouter
from benford_analyzer.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    return {"status": "ok", "version": settings.code_version}
