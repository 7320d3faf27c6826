"""API router for the keyword cleaning and analysis pipeline."""

from typing import List

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from models.schemas import (
    AnalysisSummarySchema,
    AnalyzeRequest,
    AnalyzeResponse,
    CleanRequest,
    CleanResultSchema,
    DetectRequest,
    ExportRequest,
    MarketKeywordResultSchema,
    UniqueKeywordResultSchema,
    UniqueRequest,
)
from services.keyword_analysis import (
    analyze_market_keywords,
    extract_unique_keywords,
    generate_summary,
)
from services.keyword_cleaning import detect_all_cleanable_items, execute_all_clean
from services.keyword_export import content_disposition, export_filename, keywords_to_csv
from services.keyword_keys import IdSequence

router = APIRouter()


def _bad_request(error: ValueError) -> HTTPException:
    return HTTPException(status_code=400, detail=str(error))


@router.post("/detect", response_model=List[CleanResultSchema])
async def detect_cleanable_keywords(request: DetectRequest) -> List[CleanResultSchema]:
    """
    Flag duplicate and brand keywords for every uploaded brand.

    Item ids are numbered from 1 on every call, so identical requests
    produce identical responses.
    """
    try:
        corpora = [c.to_domain() for c in request.corpora]
        results = detect_all_cleanable_items(corpora, IdSequence())
    except ValueError as e:
        raise _bad_request(e)
    return [CleanResultSchema.model_validate(r) for r in results]


@router.post("/clean", response_model=List[CleanResultSchema])
async def clean_keywords(request: CleanRequest) -> List[CleanResultSchema]:
    try:
        corpora = [c.to_domain() for c in request.corpora]
        results = execute_all_clean(corpora, [r.to_domain() for r in request.clean_results])
    except ValueError as e:
        raise _bad_request(e)
    return [CleanResultSchema.model_validate(r) for r in results]


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_keywords(request: AnalyzeRequest) -> AnalyzeResponse:
    """
    Classify cleaned keywords into common / market tiers and extract each
    brand's unique keywords.

    Raises:
        HTTPException: 400 if the clean results or config are invalid
    """
    try:
        clean_results = [r.to_domain() for r in request.clean_results]
        market = analyze_market_keywords(clean_results, request.config.to_domain())
    except ValueError as e:
        raise _bad_request(e)
    unique = extract_unique_keywords(clean_results, market)
    return AnalyzeResponse(
        market_result=MarketKeywordResultSchema.model_validate(market),
        unique_results=[UniqueKeywordResultSchema.model_validate(u) for u in unique],
        summary=AnalysisSummarySchema.model_validate(generate_summary(clean_results, market)),
    )


@router.post("/unique", response_model=List[UniqueKeywordResultSchema])
async def unique_keywords(request: UniqueRequest) -> List[UniqueKeywordResultSchema]:
    try:
        clean_results = [r.to_domain() for r in request.clean_results]
    except ValueError as e:
        raise _bad_request(e)
    unique = extract_unique_keywords(clean_results, request.market_result.to_domain())
    return [UniqueKeywordResultSchema.model_validate(u) for u in unique]


@router.post("/export")
async def export_keywords(request: ExportRequest) -> Response:
    try:
        keywords = [k.to_domain() for k in request.keywords]
    except ValueError as e:
        raise _bad_request(e)
    return Response(
        content=keywords_to_csv(keywords, bom=True),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": content_disposition(export_filename(request.filename))},
    )
