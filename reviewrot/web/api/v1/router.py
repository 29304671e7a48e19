"""API v1 router."""

from fastapi import APIRouter

from reviewrot.web.api.v1 import checks, status

router = APIRouter(prefix="/api/v1")

router.include_router(checks.router, tags=["checks"])
router.include_router(status.router, tags=["status"])
