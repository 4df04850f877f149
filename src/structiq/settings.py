"""
Application settings and default calculator inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from structiq.utils.constants import DEFAULT_DEFLECTION_LIMIT


@dataclass(frozen=True)
class AppSettings:
    """Global application configuration."""

    app_name: str = "StructIQ"
    version: str = "0.1.0"
    default_deflection_limit: int = DEFAULT_DEFLECTION_LIMIT


SETTINGS = AppSettings()


# ---------------------------------------------------------------------------
# Default inputs
# ---------------------------------------------------------------------------

_defaults_cache: dict[str, Any] | None = None

DEFAULTS_PATH = Path(__file__).resolve().parent / "config" / "defaults.yaml"


def load_defaults(path: Path | None = None) -> dict[str, Any]:
    """Load the default calculator inputs from YAML.

    The packaged file is cached after the first read; an explicit ``path``
    bypasses the cache.

    Returns
    -------
    dict
        Input mappings keyed by calculator name (``beam``, ``slab``, ...).

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    """
    global _defaults_cache
    if path is None and _defaults_cache is not None:
        return _defaults_cache

    source = Path(path) if path is not None else DEFAULTS_PATH
    if not source.exists():
        raise FileNotFoundError(f"defaults file not found: {source}")

    with open(source, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if path is None:
        _defaults_cache = data
    return data


def get_defaults(calculator: str) -> dict[str, Any]:
    """Return a copy of the default inputs for one calculator."""
    defaults = load_defaults()
    if calculator not in defaults:
        raise KeyError(
            f"No defaults for calculator {calculator!r}. "
            f"Available: {sorted(defaults)}"
        )
    return dict(defaults[calculator])


def _clear_defaults_cache() -> None:
    """Reset the internal cache (useful in tests)."""
    global _defaults_cache
    _defaults_cache = None
