"""
API Routers Package

Contains all FastAPI routers grouped by functionality.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Routers are thin wrappers around Application Layer use cases
    - All routers are mounted under /api behind the API key guard

Available Routers:
    - intake_router: analysis jobs (meeting notes, research, deliverables)
    - generate_router: generation jobs with optional callback delivery
    - jobs_router: job and run status lookups
"""

from .generate import router as generate_router
from .intake import router as intake_router
from .jobs import router as jobs_router

__all__ = ["intake_router", "generate_router", "jobs_router"]
