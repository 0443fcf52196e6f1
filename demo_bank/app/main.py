import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import router as account_router
from .core.config import get_settings
from .services import Ledger

settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


def create_app(ledger: Optional[Ledger] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "ledger", None) is None:
            # a corrupt balance record aborts startup
            app.state.ledger = Ledger(settings.account_name, data_dir=settings.data_dir)
        current = app.state.ledger
        logger.info(
            "service.started",
            extra={
                "account": current.get_name(),
                "data_path": str(current.get_data_path()),
                "port": settings.port,
            },
        )
        yield
        logger.info("service.stopped", extra={"account": current.get_name()})

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.ledger = ledger

    app.include_router(account_router)
    register_exception_handlers(app)

    @app.get("/health")
    def read_health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
