"""
Health check endpoints
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from passgen.exceptions import ResourceUnavailable
from passgen.routers.dependencies import WordlistLoader, get_wordlist_loader

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic liveness probe - returns healthy if the service is running"""
    return {"status": "healthy"}


@router.get("/health/ready")
def readiness_check(loader: WordlistLoader = Depends(get_wordlist_loader)):
    """
    Readiness probe.
    Returns 200 once the word list is available locally, 503 otherwise.
    Never downloads the list.
    """
    checks = {}
    all_healthy = True

    try:
        loader(fetch=False)
        checks["wordlist"] = "loaded"
    except ResourceUnavailable:
        checks["wordlist"] = "unavailable"
        all_healthy = False

    response_data = {
        "status": "healthy" if all_healthy else "unhealthy",
        "checks": checks,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

    if all_healthy:
        return response_data
    return JSONResponse(status_code=503, content=response_data)
