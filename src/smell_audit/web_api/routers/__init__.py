"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import analyze, health

__all__ = ["analyze", "health"]
