from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from modules.number_stats.core.parse import EmptyInput, Parsed, parse_numbers
from modules.number_stats.core.stats import (
    DEFAULT_DECIMALS,
    compute_statistics,
    statistics_rows,
    summarize_numbers,
)
from universe.errors import install_error_handlers
from universe.settings import shared_templates_dir, stats_max_items

logger = logging.getLogger(__name__)

app = install_error_handlers(FastAPI(title="Number Statistics"))

BASE_DIR = Path(__file__).parent
ROOT_DIR = BASE_DIR.parents[2]
SHARED_TEMPLATES = shared_templates_dir(ROOT_DIR)

templates = Jinja2Templates(
    directory=[str(BASE_DIR / "templates"), str(SHARED_TEMPLATES)]
)


def build_context(numbers: str | None) -> Dict[str, Any]:
    context: Dict[str, Any] = {"numbers": numbers or "", "error": None, "rows": None}
    outcome = parse_numbers(numbers, max_items=stats_max_items())
    if isinstance(outcome, EmptyInput):
        return context
    if isinstance(outcome, Parsed):
        context["rows"] = statistics_rows(compute_statistics(outcome.numbers))
    else:
        context["error"] = outcome.message
    return context


def _render(request: Request, numbers: str | None):
    base_path = request.scope.get("root_path", "").rstrip("/")
    context = build_context(numbers)
    context["base_path"] = base_path
    return templates.TemplateResponse(request, "index.html", context)


@app.get("/", response_class=HTMLResponse)
def index(request: Request, numbers: str | None = None):
    return _render(request, numbers)


@app.post("/", response_class=HTMLResponse)
def submit(request: Request, numbers: str | None = Form(None)):
    return _render(request, numbers)


@app.post("/summary")
def summary(
    numbers: str | None = Form(None),
    decimals: int = Form(DEFAULT_DECIMALS),
):
    result, error = summarize_numbers(numbers, decimals, max_items=stats_max_items())
    if error:
        return JSONResponse({"error": error}, status_code=400)
    return result
