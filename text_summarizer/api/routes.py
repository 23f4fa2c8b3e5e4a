"""HTTP route handlers for the summarization API."""

from __future__ import annotations

import time
from typing import Any, Dict, Optional, Type

import orjson
from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ValidationError

from text_summarizer.config import Settings, get_settings
from text_summarizer.export import EXPORT_FILENAME, format_summary_text
from text_summarizer.sources import SourceFetchError, decode_upload, fetch_url_text
from text_summarizer.summarizer.errors import InputEmpty
from text_summarizer.summarizer.models import StrategyPreference, SummaryMode
from text_summarizer.summarizer.service import (
    SummarizationOrchestrator,
    get_orchestrator,
)

from .schemas import (
    EngineLiteral,
    ModeLiteral,
    SummarizeRequestModel,
    SummaryResponseModel,
    SummaryResultModel,
)


router = APIRouter()


def _payload_too_large(settings: Settings) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        detail={
            "error": "payload_too_large",
            "limit_bytes": settings.max_payload_bytes,
        },
    )


async def _read_body(http_request: Request, settings: Settings) -> bytes:
    header_length = http_request.headers.get("content-length")
    if header_length:
        try:
            content_length = int(header_length)
        except ValueError:
            content_length = None
        if content_length is not None and content_length > settings.max_payload_bytes:
            raise _payload_too_large(settings)

    body_bytes = await http_request.body()
    if body_bytes and len(body_bytes) > settings.max_payload_bytes:
        raise _payload_too_large(settings)
    return body_bytes


async def _load_request_model(
    http_request: Request, model_cls: Type[BaseModel], settings: Settings
) -> BaseModel:
    body_bytes = await _read_body(http_request, settings)

    if not body_bytes:
        data: Dict[str, Any] = {}
    else:
        try:
            data = orjson.loads(body_bytes)
        except orjson.JSONDecodeError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"error": "invalid_json", "details": str(exc)},
            ) from exc

    try:
        return model_cls.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(
            exc.errors(include_url=False, include_context=False)
        ) from exc


async def load_summary_request(http_request: Request) -> SummarizeRequestModel:
    settings = get_settings()
    return await _load_request_model(http_request, SummarizeRequestModel, settings)


async def load_export_request(http_request: Request) -> SummaryResultModel:
    settings = get_settings()
    return await _load_request_model(http_request, SummaryResultModel, settings)


async def _summarize_text(
    orchestrator: SummarizationOrchestrator,
    text: str,
    mode: SummaryMode,
    engine: EngineLiteral,
    api_key: Optional[str],
    settings: Settings,
) -> SummaryResponseModel:
    preference = StrategyPreference(
        strategy=engine, credential=api_key or settings.llm_api_key
    )
    start_time = time.perf_counter()
    try:
        run = await orchestrator.run(text, mode, preference)
    except InputEmpty as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "input_empty", "details": str(exc)},
        ) from exc
    elapsed_ms = int((time.perf_counter() - start_time) * 1000)

    result = SummaryResultModel.from_domain(run.result)
    return SummaryResponseModel(
        **result.model_dump(),
        engine=run.outcome.engine,
        outcome=run.outcome.value,
        stats={
            "characters": len(text),
            "highlights": len(run.result.highlights),
            "elapsed_ms": elapsed_ms,
        },
    )


@router.post("/v1/summarize", response_model=SummaryResponseModel)
async def summarize_endpoint(
    summary_request: SummarizeRequestModel = Depends(load_summary_request),
    orchestrator: SummarizationOrchestrator = Depends(get_orchestrator),
):
    try:
        settings = get_settings()
        text = summary_request.text
        if text is None and summary_request.url is not None:
            try:
                text = await fetch_url_text(str(summary_request.url), settings)
            except SourceFetchError as exc:
                raise HTTPException(
                    status_code=status.HTTP_502_BAD_GATEWAY,
                    detail={
                        "error": "source_fetch_failed",
                        "details": exc.reason,
                        "url": exc.url,
                    },
                ) from exc

        return await _summarize_text(
            orchestrator,
            text or "",
            summary_request.mode or settings.default_mode,
            summary_request.engine,
            summary_request.api_key,
            settings,
        )
    except HTTPException as exc:
        if isinstance(exc.detail, dict) and "error" in exc.detail:
            return JSONResponse(status_code=exc.status_code, content=exc.detail)
        raise


@router.post("/v1/summarize-file", response_model=SummaryResponseModel)
async def summarize_file(
    http_request: Request,
    mode: Optional[ModeLiteral] = Query(default=None),
    engine: EngineLiteral = Query(default="local"),
    api_key: Optional[str] = Header(default=None, alias="X-LLM-Api-Key"),
    orchestrator: SummarizationOrchestrator = Depends(get_orchestrator),
):
    try:
        settings = get_settings()
        body_bytes = await _read_body(http_request, settings)
        return await _summarize_text(
            orchestrator,
            decode_upload(body_bytes),
            mode or settings.default_mode,
            engine,
            api_key,
            settings,
        )
    except HTTPException as exc:
        if isinstance(exc.detail, dict) and "error" in exc.detail:
            return JSONResponse(status_code=exc.status_code, content=exc.detail)
        raise


@router.post("/v1/export", response_class=PlainTextResponse)
async def export_summary(
    export_request: SummaryResultModel = Depends(load_export_request),
):
    content = format_summary_text(export_request.to_domain())
    return PlainTextResponse(
        content,
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
