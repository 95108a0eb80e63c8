from datetime import datetime, timezone

from fastapi import APIRouter

from schemas.settings import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc))
