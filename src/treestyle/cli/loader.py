"""Entry-point loading: imports modules for their ``create()`` side effects."""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType

logger = logging.getLogger(__name__)

# Resolved entry path -> module, so each file runs at most once per process.
_loaded: dict[Path, ModuleType] = {}


class EntryLoadError(Exception):
    """Raised when an entry module cannot be found or fails while importing."""

    def __init__(self, entry: str, cause: BaseException) -> None:
        self.entry = entry
        self.cause = cause
        super().__init__(f"failed to load {entry!r}: {type(cause).__name__}: {cause}")


def _module_path(module: ModuleType) -> Path | None:
    filename = getattr(module, "__file__", None)
    if not filename:
        return None
    return Path(filename).resolve()


def _load_path(path: Path) -> ModuleType:
    directory = str(path.parent)
    if directory not in sys.path:
        sys.path.insert(0, directory)

    if path in _loaded:
        return _loaded[path]

    module_name = path.stem
    existing = sys.modules.get(module_name)
    if existing is not None:
        # Already imported, e.g. as a sibling of an earlier entry.
        if _module_path(existing) == path:
            logger.debug("Entry %s already loaded as %s", path, module_name)
            _loaded[path] = existing
            return existing
        module_name = f"_treestyle_entry_{len(sys.modules)}_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot import {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    _loaded[path] = module
    return module


def load_entry(entry: str) -> ModuleType:
    """Import *entry*, either a ``.py`` file path or a dotted module name."""
    path = Path(entry)
    try:
        if entry.endswith(".py") or path.is_file():
            if not path.is_file():
                raise FileNotFoundError(f"no such file: {entry}")
            logger.debug("Loading entry file %s", path)
            return _load_path(path.resolve())
        logger.debug("Importing entry module %s", entry)
        return importlib.import_module(entry)
    except Exception as exc:
        raise EntryLoadError(entry, exc) from exc


def load_entries(entries: tuple[str, ...] | list[str]) -> list[ModuleType]:
    """Import every entry in order; stops at the first failure."""
    return [load_entry(entry) for entry in entries]
