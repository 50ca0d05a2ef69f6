"""
Pydantic Schemas
================
Request and response models for the API.
"""
from .analyze import (
    AnalysisFailure,
    AnalyzeRequest,
    AnalyzeResponse,
    DiagnosticModel,
    FindingModel,
    RuleInfo,
)

__all__ = [
    "AnalysisFailure",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "DiagnosticModel",
    "FindingModel",
    "RuleInfo",
]
