"""
Smell Audit Web API
===================
FastAPI-based REST API in front of the analyzer.

Quick Start:
    uvicorn smell_audit.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
