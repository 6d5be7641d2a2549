from fastapi import APIRouter, Depends
from app.core.config import settings
from app.core.rate_limit import enforce_health_rate_limit

router = APIRouter()

@router.get("/health", dependencies=[Depends(enforce_health_rate_limit)])
async def health_check():
    """Liveness check for load balancers and uptime monitors"""
    return {"status": "ok", "service": settings.SERVICE_NAME}
