from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from georoute.adapters.api.controllers.routes import router as routes_router
from georoute.domain.exceptions import EmptyGraph, GraphError, NoPathFound

app = FastAPI(title="GeoRoute")
app.include_router(routes_router)


@app.exception_handler(NoPathFound)
async def no_path_found_handler(request: Request, exc: NoPathFound) -> JSONResponse:
    return JSONResponse(
        status_code=404, content={"detail": str(exc), "reason": exc.reason}
    )


@app.exception_handler(EmptyGraph)
async def empty_graph_handler(request: Request, exc: EmptyGraph) -> JSONResponse:
    return JSONResponse(
        status_code=409, content={"detail": str(exc), "reason": "empty_graph"}
    )


@app.exception_handler(GraphError)
async def graph_error_handler(request: Request, exc: GraphError) -> JSONResponse:
    # A graph that failed to load; EmptyGraph has its own handler above.
    logging.getLogger("uvicorn.error").error(
        "Graph error: %s", exc, extra={"path": str(request.url.path)}
    )
    return JSONResponse(
        status_code=500, content={"detail": str(exc), "reason": "invalid_graph"}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON.

    Starlette's default 500 handler may return plain text/HTML.
    """

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("GEOROUTE_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (FileNotFoundError, RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
