from __future__ import annotations

import logging
from importlib import import_module
from pathlib import Path
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from universe.errors import install_error_handlers
from universe.registry import load_modules
from universe.settings import shared_templates_dir

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).parent.parent


def import_attr(path: str) -> Any:
    if ":" not in path:
        raise ValueError(f"Invalid entrypoint '{path}'. Expected module:attr.")
    module_path, attr = path.split(":", 1)
    module = import_module(module_path)
    return getattr(module, attr)


def public_modules(modules: Dict[str, Dict[str, Any]]) -> List[Dict[str, Any]]:
    items = [module for module in modules.values() if module.get("public", True)]
    items.sort(key=lambda item: item.get("title") or item.get("name", ""))
    return items


def build_app() -> FastAPI:
    app = install_error_handlers(FastAPI(title="Sparky Universe"))

    templates = Jinja2Templates(directory=str(shared_templates_dir(ROOT_DIR)))
    modules = load_modules()

    @app.get("/", response_class=HTMLResponse)
    def universe_index(request: Request):
        base_path = request.scope.get("root_path", "").rstrip("/")
        return templates.TemplateResponse(
            request,
            "index.html",
            {"modules": public_modules(modules), "base_path": base_path},
        )

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    for meta in modules.values():
        api_entry = (meta.get("entrypoints") or {}).get("api")
        if not api_entry:
            continue

        try:
            subapp = import_attr(api_entry)
        except (ImportError, AttributeError, ValueError):
            logger.warning("Skipping module %s: cannot load %s", meta["name"], api_entry, exc_info=True)
            continue

        app.mount(meta["mount"], subapp)
        logger.info("Mounted %s at %s", meta["name"], meta["mount"])

    return app
