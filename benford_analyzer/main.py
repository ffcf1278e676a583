import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from benford_analyzer.config import settings
from benford_analyzer.api import health, analyses, generator, imports

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Benford Analyzer API",
    version=settings.code_version,
    description="Benford's Law conformity analysis and Benford-distributed test data generation",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(analyses.router)
app.include_router(generator.router)
app.include_router(imports.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
