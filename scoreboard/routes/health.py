import time
from fastapi import APIRouter, Request
from ..models.response import HealthResponse

router = APIRouter()

# Track application start time
start_time = time.time()

@router.get("/health", response_model=HealthResponse)
@router.head("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    ticker = getattr(request.app.state, 'ticker', None)
    return HealthResponse(
        uptime=time.time() - start_time,
        ticker_running=bool(ticker and ticker.running)
    )
