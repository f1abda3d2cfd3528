from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
import os
import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from starlette.templating import Jinja2Templates

from kanban_board.app.routes import tasks
from kanban_board.app.errors import install_error_handlers
from kanban_board.app.middleware.access_log import AccessLogMiddleware
from kanban_board.app.middleware.cors import BoardCORSMiddleware
from kanban_board.domain.task_models import TaskStatus
from kanban_board.infra.memory.task_store import InMemoryTaskStore
from kanban_board.services.task_service import TaskService
from kanban_board.observability.logging import setup_logging

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
logger = logging.getLogger("kanban.system")

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


def create_app(store: Optional[InMemoryTaskStore] = None, seed: Optional[bool] = None) -> FastAPI:
    setup_logging()

    if store is None:
        store = InMemoryTaskStore()
    if seed is None:
        seed = os.getenv("KANBAN_SEED_TASKS", "1") != "0"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if seed:
            store.seed()
        logger.info(
            "system.start",
            extra={"category": "system", "event": "system.start", "tasks": len(store), "seeded": seed},
        )
        yield
        logger.info(
            "system.stop",
            extra={"category": "system", "event": "system.stop", "tasks": len(store)},
        )

    app = FastAPI(title="Kanban Board", lifespan=lifespan)
    app.state.task_store = store
    app.state.task_service = TaskService(store)

    app.add_middleware(
        BoardCORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=CORS_METHODS,
        allow_headers=["Content-Type"],
    )
    # Added last so it wraps CORS and sees preflights too
    app.add_middleware(AccessLogMiddleware)
    install_error_handlers(app)

    # Static files (CSS/JS)
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    # Routers
    app.include_router(tasks.router)

    # Pages
    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def home(request: Request):
        return templates.TemplateResponse(
            request,
            "index.html",
            {"statuses": [s.value for s in TaskStatus]},
        )

    @app.get("/health")
    def health(request: Request):
        return {"status": "ok", "tasks": request.app.state.task_service.count()}

    return app


def run() -> None:
    import uvicorn

    uvicorn.run(
        "kanban_board.app.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        log_config=None,
    )


app = create_app()
