from datetime import datetime, timezone

from fastapi import APIRouter, Request

from notes_api.models.notes import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(request: Request) -> HealthOut:
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return HealthOut(
        status="ok",
        message="Service is healthy",
        timestamp=now,
        environment=request.app.state.settings.environment,
    )
