"""Health check do serviço de pagamentos."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from config.settings import get_stripe_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    worker: str
    time: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: responde sempre que o serviço está configurado."""
    return HealthResponse(
        status="ok",
        worker=get_stripe_settings().worker_name,
        time=datetime.now(UTC).isoformat(),
    )
