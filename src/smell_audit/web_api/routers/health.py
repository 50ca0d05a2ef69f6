"""
Health Check Router
===================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter

from smell_audit import __version__
from smell_audit.analyzers import RULE_SET

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    Returns OK once the rule set is loaded.
    """
    return {"status": "ready", "rules": len(RULE_SET)}
