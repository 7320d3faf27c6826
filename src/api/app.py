import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import keywords
from config import settings
from constants.analysis import ANALYSIS_CONFIG

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    logger.info(
        f"Market threshold {ANALYSIS_CONFIG.common_threshold_low}/"
        f"{ANALYSIS_CONFIG.common_threshold_high}, big data limit {ANALYSIS_CONFIG.big_data_limit}"
    )
    yield

app = FastAPI(
    title=settings.app_name,
    description="Split competitor keyword exports into market, common and unique keywords",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(keywords.router, prefix="/api/v1/keywords", tags=["keywords"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}
