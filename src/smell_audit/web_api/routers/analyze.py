"""
Analyze Router
==============
Endpoints for analyzing source text.

"No issues found" (200, ``count == 0``) and "could not analyze" (422)
are always distinguishable to the caller.
"""
import logging
from typing import List

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool

from smell_audit import api as core_api
from smell_audit.analyzers import RULE_SET
from smell_audit.core.intake import check_filename, check_size
from smell_audit.errors import ParseError, SourceTooLargeError, UnsupportedFileError
from smell_audit.web_api.config import settings
from smell_audit.web_api.schemas.analyze import (
    AnalysisFailure,
    AnalyzeRequest,
    AnalyzeResponse,
    RuleInfo,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={
        413: {"description": "Source exceeds MAX_SOURCE_BYTES"},
        415: {"description": "Unsupported filename suffix"},
        422: {"model": AnalysisFailure, "description": "Source could not be parsed"},
    },
)
async def analyze_source(request: AnalyzeRequest):
    """
    Analyze one unit of TypeScript source.

    - **source**: Source text
    - **filename**: Optional filename hint (``.tsx`` selects the TSX grammar)
    """
    intake = settings.intake()
    try:
        check_size(len(request.source.encode("utf-8")), config=intake)
        if request.filename:
            check_filename(request.filename, config=intake)
    except SourceTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except UnsupportedFileError as e:
        raise HTTPException(status_code=415, detail=str(e))

    try:
        report = await run_in_threadpool(
            core_api.analyze_report, request.source, request.filename
        )
    except ParseError as e:
        logger.error(f"Analysis failed for {request.filename or '<source>'}: {e}")
        failure = AnalysisFailure(error=str(e), line=e.line, column=e.column)
        raise HTTPException(status_code=422, detail=failure.model_dump())

    return AnalyzeResponse(
        variant=report.variant.value,
        count=report.count,
        findings=[f.to_dict() for f in report.findings],
        diagnostics=[d.to_dict() for d in report.diagnostics],
    )


@router.get("/rules", response_model=List[RuleInfo])
async def list_rules():
    """
    List the compiled-in rules in evaluation order.
    """
    return [
        RuleInfo(
            id=rule.id,
            name=rule.name,
            severity=rule.severity.value,
            message=rule.message,
        )
        for rule in RULE_SET
    ]
