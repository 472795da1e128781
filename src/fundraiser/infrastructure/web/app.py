"""
FastAPI application for the fundraiser order form.

Endpoints:
- POST /submit             record a shirt order, email both parties
- GET  /admin/orders.csv   download the order ledger
- GET  /health             liveness probe

When ``server.static_dir`` is set, the order form's HTML and assets are
served from that directory at ``/``.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

from fundraiser.application.dto import OrderSubmission
from fundraiser.domain.exceptions import ValidationError
from fundraiser.domain.gateway.mail_transport import MailTransport
from fundraiser.domain.repository.order_ledger import OrderLedger
from fundraiser.infrastructure import bootstrap
from fundraiser.infrastructure.config import Settings
from fundraiser.infrastructure.web.schemas import (
    ErrorResponse,
    HealthResponse,
    SubmitOrderResponse,
)

logger = logging.getLogger(__name__)

SERVER_ERROR = "Server error"


async def _read_fields(request: Request) -> dict[str, Any]:
    """Return the submitted fields from a JSON or form-encoded body."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError as exc:
            raise ValidationError("Malformed submission") from exc
        if not isinstance(payload, dict):
            raise ValidationError("Malformed submission")
        return payload
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def create_app(
    settings: Settings,
    *,
    ledger: OrderLedger | None = None,
    mailer: MailTransport | None = None,
) -> FastAPI:
    """Build the app; the ledger header is written here if it is missing."""
    ledger = ledger or bootstrap.order_ledger(settings)
    ledger.ensure_initialized()

    submit_handler = bootstrap.submit_order_handler(settings, ledger, mailer)
    export_handler = bootstrap.export_ledger_handler(ledger)

    app = FastAPI(title="Fundraiser Shirt Orders", version="0.1.0")

    @app.post(
        "/submit",
        response_model=SubmitOrderResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def submit(request: Request):
        try:
            submission = OrderSubmission.from_form(await _read_fields(request))
            result = await run_in_threadpool(submit_handler.handle, submission)
        except ValidationError as exc:
            return JSONResponse(status_code=400, content={"error": str(exc)})
        except Exception:
            logger.exception("Order submission failed")
            return JSONResponse(status_code=500, content={"error": SERVER_ERROR})

        return SubmitOrderResponse(amount=result.amount, payment_link=result.payment_link)

    @app.get("/admin/orders.csv", response_class=FileResponse)
    def download_orders():
        try:
            path = export_handler.handle()
        except Exception:
            logger.exception("Order ledger export failed")
            return JSONResponse(status_code=500, content={"error": SERVER_ERROR})
        return FileResponse(path, media_type="text/csv", filename="orders.csv")

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse()

    if settings.server.static_dir:
        # Mounted last so the API routes above take precedence.
        app.mount(
            "/",
            StaticFiles(directory=settings.server.static_dir, html=True),
            name="static",
        )

    return app
