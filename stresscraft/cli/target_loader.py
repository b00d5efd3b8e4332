"""
Test target loading utilities for CLI.

Targets are given as ``package.module:Class`` or ``path/to/file.py:Class``;
nested classes may be addressed with dots (``module:Outer.Inner``).
"""

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class TargetLoadError(Exception):
    """Raised when a test target cannot be imported."""

    pass


def load_target(target: str) -> Any:
    """
    Import the object named by ``target``.

    Args:
        target: ``module:attribute`` or ``file.py:attribute``

    Returns:
        The imported object

    Raises:
        TargetLoadError: If the module or attribute cannot be found
    """
    location, _, qualname = target.rpartition(":")
    if not location or not qualname:
        raise TargetLoadError(
            f"Target {target!r} should look like 'module:Class' or 'file.py:Class'"
        )

    module = _import_location(location)
    obj: Any = module
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetLoadError(
                f"{qualname!r} not found in {location!r}"
            ) from e
    return obj


def _import_location(location: str) -> Any:
    if location.endswith(".py"):
        return _import_file(Path(location))
    try:
        return importlib.import_module(location)
    except ImportError as e:
        raise TargetLoadError(f"Cannot import module {location!r}: {e}") from e


def _import_file(path: Path) -> Any:
    if not path.is_file():
        raise TargetLoadError(f"File does not exist: {path}")

    module_name = f"_stresscraft_target_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise TargetLoadError(f"Cannot load {path} as a Python module")

    module = importlib.util.module_from_spec(spec)
    # must be in sys.modules while executing
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise TargetLoadError(f"Failed to execute {path}: {e}") from e
    logger.debug(f"Loaded test module from {path}")
    return module
