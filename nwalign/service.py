"""HTTP service exposing the aligner as `POST /align`."""

from __future__ import annotations

import asyncio
import json
import logging

from aiohttp import web
from pydantic import BaseModel, ValidationError

from nwalign.algorithms import NeedlemanWunschAligner
from nwalign.types import PenaltyParameters, Sequence

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

ALIGNER_KEY = web.AppKey("aligner", NeedlemanWunschAligner)


class AlignRequest(BaseModel):
    seq1: str
    seq2: str


def _error(message: str, status: int = 400) -> web.Response:
    return web.json_response({"error": message}, status=status)


async def align_post(request: web.Request) -> web.Response:
    """Align the two raw sequences in the request body and return the record."""
    try:
        payload = AlignRequest.model_validate(await request.json())
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        return _error(f"Malformed JSON body: {exc}")
    except ValidationError as exc:
        return _error(f"Invalid request: {exc.errors(include_url=False)}")

    logger.info(
        "Processing request (%d x %d symbols)", len(payload.seq1), len(payload.seq2)
    )
    aligner = request.app[ALIGNER_KEY]
    seq1 = Sequence.from_string(payload.seq1, identifier="seq1")
    seq2 = Sequence.from_string(payload.seq2, identifier="seq2")
    alignment = await asyncio.to_thread(aligner.align, seq1, seq2)
    return web.json_response(alignment.to_dict())


def create_app(parameters: PenaltyParameters) -> web.Application:
    """Build the application around one read-only set of penalties."""
    app = web.Application()
    app[ALIGNER_KEY] = NeedlemanWunschAligner(parameters)
    app.router.add_post("/align", align_post)
    return app


def serve(
    parameters: PenaltyParameters,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Run the service until interrupted. Bind failures raise OSError."""
    logger.info("Starting server on http://%s:%d", host, port)
    web.run_app(create_app(parameters), host=host, port=port, print=None)


__all__ = ["AlignRequest", "align_post", "create_app", "serve", "ALIGNER_KEY"]
