"""ShareSolver FastAPI application.

Endpoints:
- POST /recover  – body is a raw share document; returns the Result
- GET  /audit    – audit log entries and chain validity
- GET  /health   – liveness probe

The request body is read as bytes and handed to the share-file parser,
so duplicate keys are rejected exactly as they are for files.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from sharesolver.audit import AuditLog
from sharesolver.driver import process_document
from sharesolver.errors import SolverError

logger = logging.getLogger(__name__)


class AuditResponse(BaseModel):
    entries: List[Dict[str, Any]]
    chain_valid: bool


def create_app(audit: AuditLog | None = None) -> FastAPI:
    """Factory that creates the service app around *audit*."""
    if audit is None:
        audit = AuditLog()

    app = FastAPI(title="ShareSolver")

    @app.post("/recover")
    async def recover(request: Request, check: bool = True):
        body = await request.body()
        logger.debug("recover: %d byte document", len(body))
        try:
            result = process_document(body, source="request", audit=audit, check=check)
        except SolverError as exc:
            raise HTTPException(status_code=422, detail=exc.to_dict())
        return result.to_dict()

    @app.get("/audit", response_model=AuditResponse)
    async def get_audit():
        return AuditResponse(entries=audit.entries(), chain_valid=audit.verify_chain())

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
