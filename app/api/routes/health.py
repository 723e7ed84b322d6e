from fastapi import APIRouter

from app.schemas.subscription import HealthRead

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthRead)
def health():
    return HealthRead(status="ok", message="Subscription service is running")
