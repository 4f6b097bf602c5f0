"""
Health check endpoints
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from dicepass.services.telemetry import get_counters_snapshot

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic liveness probe - returns healthy if the service is running"""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(request: Request):
    """
    Readiness probe.
    Returns 200 once the wordlist is loaded, 503 otherwise.
    """
    checks = {}
    wordlist = getattr(request.app.state, "wordlist", None)

    if wordlist is None:
        checks["wordlist"] = "not loaded"
    elif wordlist.is_complete:
        checks["wordlist"] = "complete"
    else:
        missing = len(wordlist.missing_codes())
        checks["wordlist"] = f"incomplete ({missing} missing)"

    ready = wordlist is not None
    response_data = {
        "status": "healthy" if ready else "unhealthy",
        "checks": checks,
        "counters": get_counters_snapshot(),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

    if ready:
        return response_data
    return JSONResponse(status_code=503, content=response_data)
