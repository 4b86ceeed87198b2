from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from .core.events import startup_event, shutdown_event
from .logger import get_logger
from .routes import games, health, leaderboard, score
from .store import ScoreboardManager

logger = get_logger(__name__)


def create_app(manager: Optional[ScoreboardManager] = None) -> FastAPI:
    """Build the app around a manager; the process-wide one when none is given"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await startup_event(app)
        logger.info("Scoreboard service started")
        try:
            yield
        finally:
            await shutdown_event(app)
            logger.info("Scoreboard service stopped")

    app = FastAPI(
        default_response_class=ORJSONResponse,
        title="Scoreboard Service",
        description="In-memory per-game leaderboards with throttled score submission",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.manager = manager or ScoreboardManager.get_instance()
    app.state.ticker = None

    app.include_router(health.router)
    app.include_router(score.router)
    app.include_router(games.router)
    app.include_router(leaderboard.router)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    # State lives in this process, so a single worker.
    uvicorn.run(
        "scoreboard.main:app",
        host="0.0.0.0",
        port=8000,
        workers=1,
        loop="uvloop",
        http="httptools",
        log_level="info"
    )
