"""FastAPI application exposing the emission calculators."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .routes.electric import router as electric_router
from .routes.electronics import router as electronics_router
from .routes.steel import router as steel_router
from .routes.summary import router as summary_router
from .routes.transport import router as transport_router

app = FastAPI(title="GHG Calculator")


@app.get("/health")
def health() -> JSONResponse:
    """Simple liveness endpoint used by deployment probes."""

    return JSONResponse({"status": "ok"})


app.include_router(transport_router)
app.include_router(electric_router)
app.include_router(electronics_router)
app.include_router(steel_router)
app.include_router(summary_router)


__all__ = ["app", "health"]
