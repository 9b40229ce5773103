# /icp_assistant/routes/classification.py

import structlog
from typing import Optional
from fastapi import APIRouter, Query, Request

from icp_assistant.config.settings import settings
from icp_assistant.models.api import APIResponse, ClassifyRequest, KeywordRequest
from icp_assistant.services.classifier_service import text_classifier
from icp_assistant.services.keyword_service import keyword_expander
from icp_assistant.utils.rate_limiter import limiter

# This file exposes the text classifier directly so clients can standardize
# industries, locations and decision-maker roles (and offer suggestions)
# outside of a wizard turn, and expands topics into search keywords.

router = APIRouter(tags=["Classification"])
log = structlog.get_logger(__name__)


async def _classify(field: str, text: str) -> APIResponse:
    result = await text_classifier.classify(field, text)
    log.info("Classified input", field=field, source=result.source, confidence=result.confidence)
    return APIResponse(
        success=True,
        message=f"{field.capitalize()} classified.",
        data=result.model_dump(mode="json"),
        version=settings.api_version,
    )


def _suggestions(field: str, query: Optional[str]) -> APIResponse:
    return APIResponse(
        success=True,
        message="Suggestions retrieved.",
        data={"suggestions": text_classifier.suggestions(field, query)},
        version=settings.api_version,
    )


@router.post("/classify-industry", response_model=APIResponse)
@limiter.limit("30/minute")
async def classify_industry(request: Request, body: ClassifyRequest):
    return await _classify("industry", body.input)


@router.get("/industry-suggestions", response_model=APIResponse)
async def industry_suggestions(q: Optional[str] = Query(default=None, max_length=100)):
    return _suggestions("industry", q)


@router.post("/classify-location", response_model=APIResponse)
@limiter.limit("30/minute")
async def classify_location(request: Request, body: ClassifyRequest):
    return await _classify("location", body.input)


@router.get("/location-suggestions", response_model=APIResponse)
async def location_suggestions(q: Optional[str] = Query(default=None, max_length=100)):
    return _suggestions("location", q)


@router.post("/classify-decision-makers", response_model=APIResponse)
@limiter.limit("30/minute")
async def classify_decision_makers(request: Request, body: ClassifyRequest):
    return await _classify("role", body.input)


@router.get("/decision-maker-suggestions", response_model=APIResponse)
async def decision_maker_suggestions(q: Optional[str] = Query(default=None, max_length=100)):
    return _suggestions("role", q)


@router.post("/expand-keywords", response_model=APIResponse)
@limiter.limit("30/minute")
async def expand_keywords(request: Request, body: KeywordRequest):
    """Expands a topic into search keywords, served from the cache when available."""
    expansion = await keyword_expander.expand(body.topic, body.context)
    log.info("Expanded keywords", topic=body.topic, context=body.context, source=expansion.source)
    return APIResponse(
        success=True,
        message="Keywords expanded.",
        data={
            "original": expansion.original,
            "context": expansion.context,
            "expanded": expansion.keywords,
            "keywords": expansion.keywords,
            "cached": expansion.cached,
            "source": expansion.source,
        },
        version=settings.api_version,
    )
