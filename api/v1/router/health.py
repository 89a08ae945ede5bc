from datetime import datetime, timezone
from fastapi import APIRouter
from schema.common import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health_check():
    """Liveness check"""
    return HealthOut(ts=datetime.now(timezone.utc))
