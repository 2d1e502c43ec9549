"""FastAPI app exposing the drafting controller."""

from __future__ import annotations

import html
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from draftdesk.app.controller import DraftingController
from draftdesk.config import Settings, load_settings
from draftdesk.engine.session import SessionProvider, default_session_factory
from draftdesk.logging import configure_logging, get_logger
from draftdesk.render.blocks import render_html


class SubmitRequest(BaseModel):
    """Submit request."""

    message: str


_PAGE = """<!doctype html>
<html>
<head><meta charset="utf-8"><title>DraftDesk</title></head>
<body>
<header><span class="mode">{mode_label}</span>{error}</header>
<main>{body}</main>
<input name="message" placeholder="{placeholder}"{disabled}>
</body>
</html>
"""


def create_app(
    settings: Settings | None = None,
    controller: DraftingController | None = None,
) -> FastAPI:
    """Create FastAPI app."""

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger = get_logger(__name__)

    if controller is None:
        controller = DraftingController(SessionProvider(default_session_factory(settings)), settings)

    app = FastAPI(title="DraftDesk", version="0.1.0")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/state")
    def state() -> dict[str, Any]:
        return controller.snapshot()

    @app.post("/submit")
    def submit(req: SubmitRequest) -> JSONResponse:
        logger.info("Submit requested", extra={"message_len": len(req.message)})
        if not req.message.strip():
            return JSONResponse(
                status_code=422,
                content={"accepted": False, "state": controller.snapshot()},
            )
        accepted = controller.submit(req.message)
        return JSONResponse(
            status_code=200 if accepted else 409,
            content={"accepted": accepted, "state": controller.snapshot()},
        )

    @app.post("/sections/{section_id}/select")
    def select_section(section_id: str) -> dict[str, Any]:
        try:
            controller.select_section(section_id)
        except LookupError:
            raise HTTPException(status_code=404, detail="section not found") from None
        return controller.snapshot()

    @app.post("/reset")
    def reset() -> dict[str, Any]:
        try:
            controller.reset()
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from None
        return controller.snapshot()

    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        view = controller.view()
        if view is None:
            body = '<p class="empty">Awaiting Inspiration. Enter a topic below to ignite the engine.</p>'
        else:
            body = render_html(view)
        error = controller.state.error
        return _PAGE.format(
            mode_label=html.escape(controller.state.mode_label),
            error=f'<span class="error">{html.escape(error)}</span>' if error else "",
            body=body,
            placeholder=html.escape(controller.state.placeholder, quote=True),
            disabled=" disabled" if controller.state.is_processing else "",
        )

    return app
