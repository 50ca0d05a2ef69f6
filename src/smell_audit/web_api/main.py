"""
FastAPI Application
===================
Main entry point for the Smell Audit API.

Run with:
    uvicorn smell_audit.web_api.main:app --reload
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smell_audit import __version__
from smell_audit.web_api.config import settings
from smell_audit.web_api.routers import analyze, health

# Handlers are left to the server; only the package threshold is set here.
logging.getLogger("smell_audit").setLevel(settings.LOG_LEVEL.upper())

app = FastAPI(
    title="Smell Audit API",
    description="Structural smell detection for TypeScript source",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(analyze.router, tags=["Analyze"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Smell Audit API",
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "endpoints": ["/health", "/ready", "/rules", "/analyze"],
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m smell_audit.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
