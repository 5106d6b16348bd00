# app/main.py
import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import Settings, get_settings
from app.core.logging import setup_logging
from app.ticket.exceptions import TicketError
from app.ticket.routes import router as ticket_router
from app.ticket.seed import fake_tickets
from app.ticket.services import TicketCollection

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESC,
        version=settings.APP_VERSION,
    )
    app.state.tickets = TicketCollection(
        fake_tickets() if settings.SEED_FAKE_DATA else (),
        require_operation_tag=settings.REQUIRE_OPERATION_TAG,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS", "PATCH", "PUT", "DELETE"],
        allow_headers=["*"],
        expose_headers=["X-Status-Message"],
    )

    @app.exception_handler(TicketError)
    async def ticket_error(request: Request, exc: TicketError):
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.to_dict())
        return PlainTextResponse(exc.message, status_code=400)

    # Routers
    app.include_router(ticket_router)

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok"}

    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    logger.info("%s ready with %d tickets", settings.APP_NAME, len(app.state.tickets))
    return app


app = create_app()


def serve() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    serve()
