# api/main.py
"""
FastAPI backend for GJSTEP - exposes the step-by-step solver as a REST API.
"""

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field
from typing import List, Optional, Union
import sys
from pathlib import Path

# Add project root to path to import gjstep
sys.path.insert(0, str(Path(__file__).parent.parent))

from gjstep import __version__
from gjstep.config import DEFAULT_CONFIG
from gjstep.collect import rows_to_array
from gjstep.kernel import format_value
from gjstep.pager import LogPager
from gjstep.parse import InvalidNumberError, parse_number
from gjstep.session import SolveSession, SolveResult


app = FastAPI(
    title="GJSTEP API",
    description="Gauss-Jordan solver with a readable step trace",
    version=__version__,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class SystemParams(BaseModel):
    """Augmented matrix [A | b]; cells are numbers or strings like "1/3"."""
    cells: List[List[Union[float, str]]] = Field(
        ..., description="Rows of the augmented matrix, 2x3 or 3x4"
    )


class SolveResponse(BaseModel):
    """Outcome of one solve, with the full trace."""
    outcome: str
    warning: Optional[str] = None
    solution: Optional[List[str]] = None
    solution_values: Optional[List[float]] = None
    matrix: List[List[str]]
    lines: List[str]
    total_lines: int
    dropped: int


class PageResponse(BaseModel):
    """One window of the trace."""
    top: int
    page_size: int
    total_lines: int
    lines: List[str]
    footer: str


# =============================================================================
# Solving
# =============================================================================

def _cell_value(cell: Union[float, str]) -> float:
    if isinstance(cell, str):
        return parse_number(cell)
    return float(cell)


def run_solve(params: SystemParams):
    """Parse cells, resolve the shape, solve. Input errors become HTTP 400."""
    try:
        grid = [[_cell_value(c) for c in row] for row in params.cells]
        A, shape = rows_to_array(grid, DEFAULT_CONFIG)
    except InvalidNumberError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = SolveSession(DEFAULT_CONFIG).solve(A)
    return result, shape.warning


def to_response(result: SolveResult, warning: Optional[str]) -> SolveResponse:
    solution = None
    values = None
    if result.solution is not None:
        solution = [format_value(v) for v in result.solution]
        values = [float(v) for v in result.solution]

    return SolveResponse(
        outcome=result.outcome.value,
        warning=warning,
        solution=solution,
        solution_values=values,
        matrix=[[format_value(v) for v in row] for row in result.matrix],
        lines=list(result.lines),
        total_lines=len(result.lines),
        dropped=result.dropped,
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "GJSTEP API"}


@app.post("/api/solve", response_model=SolveResponse)
async def solve(params: SystemParams):
    """Solve a system and return the whole trace."""
    result, warning = run_solve(params)
    return to_response(result, warning)


@app.post("/api/solve/page", response_model=PageResponse)
async def solve_page(
    params: SystemParams,
    top: int = Query(0, ge=0),
    page_size: int = Query(DEFAULT_CONFIG.page_size, ge=1, le=DEFAULT_CONFIG.log_capacity),
):
    """Solve a system and return one page of its trace."""
    result, _ = run_solve(params)
    pager = LogPager(total=len(result.lines), page_size=page_size, top=top)
    return PageResponse(
        top=pager.top,
        page_size=pager.page_size,
        total_lines=pager.total,
        lines=pager.visible(result.lines),
        footer=pager.footer(),
    )


@app.post("/api/export/txt")
async def export_txt(params: SystemParams):
    """Export the trace as plain text."""
    result, _ = run_solve(params)
    body = "\n".join(result.lines) + "\n"

    return StreamingResponse(
        iter([body]),
        media_type="text/plain",
        headers={"Content-Disposition": "attachment; filename=gauss_jordan_steps.txt"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
