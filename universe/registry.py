from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

MODULES_PATH = Path(__file__).parent.parent / "modules"


def _normalize_module(data: Dict[str, Any], *, path: Path) -> Dict[str, Any] | None:
    name = data.get("name")
    if not name:
        return None

    slug = data.get("slug") or str(name).replace("_", "-")
    mount = data.get("mount") or f"/{slug}"
    if not mount.startswith("/"):
        mount = "/" + mount
    public = data.get("public")
    if public is None:
        public = True

    normalized = {**data}
    normalized.update(
        {
            "name": name,
            "slug": slug,
            "mount": mount.rstrip("/") or "/",
            "public": bool(public),
            "path": path,
        }
    )
    return normalized


def load_modules(modules_path: Path = MODULES_PATH) -> Dict[str, Dict[str, Any]]:
    """Read every ``module.yaml`` manifest below ``modules_path``, keyed by name."""
    modules: Dict[str, Dict[str, Any]] = {}
    if not modules_path.exists():
        return modules

    for module_dir in sorted(modules_path.iterdir()):
        manifest = module_dir / "module.yaml"
        if not module_dir.is_dir() or not manifest.exists():
            continue
        with open(manifest, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        normalized = _normalize_module(data, path=module_dir)
        if normalized is None:
            logger.warning("Manifest without a name: %s", manifest)
            continue
        modules[normalized["name"]] = normalized
    return modules
