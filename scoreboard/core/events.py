import asyncio

from ..config import rate_limit
from ..logger import get_logger
from .ticker import RateLimitTicker

logger = get_logger(__name__)

async def startup_event(app):
    """Start the periodic rate limit refresh for the app's manager"""
    try:
        ticker = RateLimitTicker(app.state.manager, interval=rate_limit.tick_interval)
        await ticker.start()
        app.state.ticker = ticker
    except Exception as e:
        logger.error(f"Failed to start rate limit ticker: {e}")
        raise

async def shutdown_event(app):
    """Stop the ticker so nothing acts on a torn-down manager"""
    ticker = getattr(app.state, 'ticker', None)
    if ticker is None:
        return
    try:
        async with asyncio.timeout(5.0):
            await ticker.stop()
    except asyncio.TimeoutError:
        logger.warning("Ticker shutdown timed out")
    finally:
        app.state.ticker = None
