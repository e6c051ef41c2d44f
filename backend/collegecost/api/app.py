"""FastAPI application: create_app factory with the /lookup endpoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from collegecost.exceptions import (
    DirectoryNotReadyError,
    LookupRequestError,
    MalformedDataError,
)
from collegecost.formatting import format_cost

if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from pathlib import Path

    from collegecost.lookup import CostLookup

logger = logging.getLogger(__name__)

NOT_READY_MESSAGE = "Error: College data is not loaded"
MALFORMED_DATA_MESSAGE = "Error: College cost data is malformed"


def create_app(
    *,
    lookup: CostLookup | None = None,
    dataset_path: str | Path | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    lookup
        Optional pre-built lookup for dependency injection (e.g. tests).
    dataset_path
        CSV to load during application startup when no lookup is given.
        Startup fails if the file cannot be loaded, so the server never
        accepts requests against an empty directory.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.lookup is None and dataset_path is not None:
            from collegecost.factory import create_lookup

            app.state.lookup = create_lookup(dataset_path)
        yield

    app = FastAPI(title="College Cost Lookup", version="0.1.0", lifespan=lifespan)

    # Store on app state so tests can inject a lookup
    app.state.lookup = lookup

    def _get_lookup() -> CostLookup:
        lk: CostLookup | None = app.state.lookup
        if lk is None:
            raise DirectoryNotReadyError(NOT_READY_MESSAGE)
        return lk

    # ------------------------------------------------------------------
    # Error translation
    # ------------------------------------------------------------------

    @app.exception_handler(LookupRequestError)
    async def lookup_request_error(
        request: Request, exc: LookupRequestError,
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"message": exc.message})

    @app.exception_handler(MalformedDataError)
    async def malformed_data_error(
        request: Request, exc: MalformedDataError,
    ) -> JSONResponse:
        logger.error("Malformed cost data: %s", exc, exc_info=exc)
        return JSONResponse(
            status_code=500, content={"message": MALFORMED_DATA_MESSAGE},
        )

    @app.exception_handler(DirectoryNotReadyError)
    async def not_ready_error(
        request: Request, exc: DirectoryNotReadyError,
    ) -> JSONResponse:
        logger.warning("Lookup requested before the dataset was loaded")
        return JSONResponse(status_code=503, content={"message": NOT_READY_MESSAGE})

    # ------------------------------------------------------------------
    # GET /lookup
    # ------------------------------------------------------------------

    @app.get("/lookup")
    def lookup_cost(
        college: str | None = None,
        room_and_board: str | None = None,
    ) -> dict[str, str]:
        logger.info("Responding to college lookup request")
        result = _get_lookup().lookup(college, room_and_board)
        return {"Cost": format_cost(result.cost)}

    return app
