"""FastAPI server for tersify.

Endpoints are registered on an ``APIRouter`` so that a host
application can mount them under a prefix. The standalone ``app``
includes the router directly::

    uvicorn tersify.server:app --reload --port 8421

or run ``tersify-server`` to serve it on localhost:8421.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException
from pydantic import BaseModel

from tersify import __version__
from tersify.dialect import Dialect
from tersify.errors import TerseError
from tersify.io import split_lines
from tersify.pipeline import TersePipeline

router = APIRouter()

app = FastAPI(
    title="tersify API",
    description="Terse, grep-friendly variants of LaTeX specifications",
    version=__version__,
)


class TerseRequest(BaseModel):
    """Request model for simplifying a document."""

    text: str
    dialect: dict[str, Any] | None = None


@router.get("/api/health")
async def health() -> dict[str, Any]:
    """Health check."""
    return {"status": "ok", "version": __version__}


@router.get("/api/dialect")
async def get_dialect() -> dict[str, Any]:
    """Return the default marker vocabulary."""
    return Dialect.default().to_dict()


@router.post("/api/terse")
async def terse(request: TerseRequest) -> dict[str, Any]:
    """Simplify a whole document sent as text."""
    try:
        dialect = Dialect.from_dict(request.dialect) if request.dialect else Dialect.default()
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid dialect: {e}")

    try:
        result = TersePipeline(dialect).run(split_lines(request.text))
    except TerseError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return {
        "text": "".join(f"{line}\n" for line in result.lines),
        "line_count": result.output_line_count,
        "input_line_count": result.input_line_count,
        "passes": [p.to_dict() for p in result.passes],
    }


app.include_router(router)


def run_server(host: str = "127.0.0.1", port: int = 8421) -> None:
    """Start the standalone server via uvicorn.

    Args:
        host: Bind address. Defaults to localhost.
        port: Port number.
    """
    import uvicorn

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
