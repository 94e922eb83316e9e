"""FastAPI routes for running analyses and reading their results."""

from __future__ import annotations

import asyncio
from dataclasses import asdict, replace
from pathlib import Path
from typing import Literal

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import BaseModel

from import_map.errors import AnalysisError
from import_map.exporter import generate_html, generate_text_report, graph_to_dict
from import_map.extractor import extract_imports
from import_map.models import AnalysisConfig, AnalysisResult
from import_map.pipeline import run_analysis
from import_map.web.state import AnalysisSession, AppState

router = APIRouter(prefix="/api")


# --- Request / Response models ---

class AnalyzeRequest(BaseModel):
    path: str
    include: list[str] | None = None
    exclude: list[str] | None = None
    max_file_size: int | None = None
    detect_type_only_imports: bool = True


class ImportsRequest(BaseModel):
    filename: str
    source: str
    detect_type_only_imports: bool = True


# --- Helpers ---

def _state(request: Request) -> AppState:
    return request.app.state.analyses


def _get_result(request: Request, analysis_id: str) -> AnalysisResult:
    session = _state(request).get(analysis_id)
    if session is None or session.result is None:
        raise HTTPException(404, "Analysis not found")
    return session.result


def _summary(session: AnalysisSession) -> dict:
    result = session.result
    return {
        "analysis_id": session.id,
        "working_dir": session.working_dir,
        "timestamp": session.timestamp,
        "stats": asdict(result.stats) if result else None,
        "errors": [asdict(e) for e in result.errors] if result else [],
    }


# --- Endpoints ---

@router.post("/analyze")
async def analyze(req: AnalyzeRequest, request: Request):
    working_dir = Path(req.path).expanduser().resolve()
    if not working_dir.is_dir():
        raise HTTPException(404, f"Directory not found: {working_dir}")

    overrides: dict = {
        "working_dir": working_dir,
        "detect_type_only_imports": req.detect_type_only_imports,
    }
    if req.include is not None:
        overrides["include"] = req.include
    if req.exclude is not None:
        overrides["exclude"] = req.exclude
    if req.max_file_size is not None:
        overrides["max_file_size"] = req.max_file_size
    config = replace(AnalysisConfig(), **overrides)

    try:
        result = await asyncio.to_thread(run_analysis, config)
    except AnalysisError as e:
        raise HTTPException(400, str(e))

    session = AnalysisSession(working_dir=str(working_dir), result=result)
    _state(request).add(session)
    return _summary(session)


@router.get("/analysis/{analysis_id}")
async def get_analysis(analysis_id: str, request: Request):
    _get_result(request, analysis_id)
    return _summary(_state(request).get(analysis_id))


@router.get("/analysis/{analysis_id}/graph")
async def get_graph(analysis_id: str, request: Request):
    return graph_to_dict(_get_result(request, analysis_id).graph)


@router.get("/analysis/{analysis_id}/cycles")
async def get_cycles(
    analysis_id: str,
    request: Request,
    kind: Literal["all", "runtime", "type_only"] = Query("all"),
):
    cycles = _get_result(request, analysis_id).graph.circular_dependencies or ()
    if kind == "runtime":
        cycles = [c for c in cycles if not c.type_only]
    elif kind == "type_only":
        cycles = [c for c in cycles if c.type_only]
    return {
        "analysis_id": analysis_id,
        "kind": kind,
        "cycles": [{"chain": list(c.chain), "type_only": c.type_only} for c in cycles],
    }


@router.get("/analysis/{analysis_id}/report", response_class=PlainTextResponse)
async def get_report(analysis_id: str, request: Request):
    return generate_text_report(_get_result(request, analysis_id).graph)


@router.get("/analysis/{analysis_id}/html", response_class=HTMLResponse)
async def get_html(analysis_id: str, request: Request):
    return generate_html(_get_result(request, analysis_id).graph)


@router.delete("/analysis/{analysis_id}")
async def delete_analysis(analysis_id: str, request: Request):
    if not _state(request).delete(analysis_id):
        raise HTTPException(404, "Analysis not found")
    return {"deleted": analysis_id}


@router.post("/imports")
async def list_imports(req: ImportsRequest):
    """Extract imports from posted source text; nothing is read from disk."""
    try:
        declared = extract_imports(
            req.filename,
            source=req.source,
            detect_type_only=req.detect_type_only_imports,
        )
    except ValueError as e:
        raise HTTPException(400, str(e))
    return {"imports": [asdict(imp) for imp in declared]}
