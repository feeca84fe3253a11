"""Reconstruction service (FastAPI).

Endpoints:
- POST /decode       – decode one base-N value to decimal
- POST /reconstruct  – run the consensus solver over a share file
- GET  /audit        – hash-chained log of reconstruction requests

Every ``ReconstructionError`` becomes HTTP 400 with ``{"kind", "message"}``
as detail.  The service keeps no state besides its audit log.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from sharevote.config import DEFAULT_MODE, MODES
from sharevote.consensus.solver import reconstruct
from sharevote.errors import ReconstructionError
from sharevote.io.share_file import from_document
from sharevote.service.audit import AuditLog, secret_digest
from sharevote.shares import decode_share

logger = logging.getLogger(__name__)


# ------ request / response models ------


class DecodeRequest(BaseModel):
    base: int
    value: str


class ReconstructRequest(BaseModel):
    share_file: Dict[str, Any]
    mode: str = DEFAULT_MODE


class ReconstructResponse(BaseModel):
    secret: str
    suspects: List[int]
    votes: int
    subsets: int
    mode: str


class AuditResponse(BaseModel):
    entries: List[Dict[str, Any]]
    chain_valid: bool


class ServiceState:
    """Per-app mutable state."""

    def __init__(self) -> None:
        self.audit = AuditLog()


def _bad_request(exc: ReconstructionError) -> HTTPException:
    return HTTPException(400, {"kind": exc.kind, "message": str(exc)})


def create_app(state: Optional[ServiceState] = None) -> FastAPI:
    """Factory that creates a reconstruction service app."""
    if state is None:
        state = ServiceState()

    app = FastAPI(title="sharevote")
    app.state.service = state

    @app.post("/decode")
    async def decode(req: DecodeRequest):
        try:
            value = decode_share(req.base, req.value)
        except ReconstructionError as exc:
            raise _bad_request(exc)
        return {"value": value.to_decimal_string()}

    @app.post("/reconstruct", response_model=ReconstructResponse)
    async def reconstruct_secret(req: ReconstructRequest):
        if req.mode not in MODES:
            raise HTTPException(
                400, {"kind": "InvalidMode", "message": f"mode must be one of {MODES}"}
            )
        try:
            parsed = from_document(req.share_file)
            result = reconstruct(parsed.to_points(), parsed.k, req.mode)
        except ReconstructionError as exc:
            logger.info("Rejected reconstruction: %s", exc)
            state.audit.append("reject", {"kind": exc.kind, "mode": req.mode})
            raise _bad_request(exc)

        suspects = sorted(result.suspects)
        state.audit.append(
            "reconstruct",
            {
                "n": len(parsed.shares),
                "k": parsed.k,
                "mode": req.mode,
                "secret_sha256": secret_digest(result.secret),
                "suspects": suspects,
            },
        )
        return ReconstructResponse(
            secret=str(result.secret),
            suspects=suspects,
            votes=result.votes,
            subsets=result.subsets,
            mode=req.mode,
        )

    @app.get("/audit", response_model=AuditResponse)
    async def audit():
        return AuditResponse(
            entries=state.audit.entries(),
            chain_valid=state.audit.verify_chain(),
        )

    return app


app = create_app()
