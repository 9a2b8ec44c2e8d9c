"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1 import router as v1_router
from .config import get_settings
from .evaluation.rubrics import EVALUATION_DIMENSIONS, FEEDBACK_BANDS, RUBRIC_CATEGORIES

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Starting %s (scoring provider: %s)", settings.app_name, settings.scoring_provider)
    yield


app = FastAPI(
    title="ecomap",
    description="EcoScore scoring for sustainability simulations on a map",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(v1_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "0.1.0"}


@app.get("/api-info")
async def api_info():
    """API information endpoint describing both scoring rubrics."""
    return {
        "name": "ecomap",
        "description": "EcoScore scoring for sustainability simulations on a map",
        "version": "0.1.0",
        "docs_url": "/docs",
        "api_prefix": settings.api_v1_prefix,
        "endpoints": {
            "rubric_score": f"{settings.api_v1_prefix}/ecoscore/rubric",
            "evaluate": f"{settings.api_v1_prefix}/ecoscore/evaluate",
            "challenge_area": f"{settings.api_v1_prefix}/challenge/area",
            "location_analysis": f"{settings.api_v1_prefix}/challenge/analysis",
        },
        "rubric": {
            "max_score": 1000,
            "categories": {
                name: {"ceiling": config["ceiling"], "recommend_below": config["recommend_below"]}
                for name, config in RUBRIC_CATEGORIES.items()
            },
            "bands": {label: lower_bound for lower_bound, label, _ in FEEDBACK_BANDS},
        },
        "evaluation": {
            "score_range": [1, 1000],
            "dimensions": {
                name: {
                    "weight": config["weight"],
                    "max_points": config["max_points"],
                    "description": config["description"],
                }
                for name, config in EVALUATION_DIMENSIONS.items()
            },
        },
        "max_placements": settings.max_placements,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("ecomap.main:app", host="0.0.0.0", port=8000)
