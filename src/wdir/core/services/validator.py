from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper between raw configuration (defaults, user file, CLI
overrides) and the traversal engine. Handles type coercion and default value
injection, and derives the TraversalRequest from the cleaned configuration.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from wdir.core.services.patterns import DEFAULT_PATTERN, parse_pattern
from wdir.domain.config import get_default_config
from wdir.domain.errors import ConfigError
from wdir.domain.traversal_models import UNBOUNDED_DEPTH, TraversalRequest
from wdir.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_BOOL_FIELDS = ["recursive", "all", "bare", "quiet", "raw"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise ConfigError on bad values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise ConfigError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    merged["directory"] = _as_str(
        merged.get("directory"), defaults["directory"], "directory", warnings, strict
    )
    # Patterns are significant character for character: no stripping.
    merged["pattern"] = _as_str(
        merged.get("pattern"), DEFAULT_PATTERN, "pattern", warnings, strict, strip=False
    )

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["depth"] = _as_depth(merged.get("depth"), warnings, strict)

    return merged, warnings


def resolve_depth(config: Dict[str, Any]) -> int:
    """
    Derive the depth budget from a validated configuration.

    An explicit depth wins; otherwise --recursive means unbounded and the
    default is no recursion at all.
    """
    depth = config.get("depth")
    if depth is not None:
        return int(depth)
    if config.get("recursive"):
        return UNBOUNDED_DEPTH
    return 0


def to_request(config: Dict[str, Any]) -> TraversalRequest:
    """
    Build the TraversalRequest described by a validated configuration.

    Args:
        config: Output of validate_config().

    Returns:
        TraversalRequest: Immutable traversal parameters.
    """
    parsed = parse_pattern(config["pattern"])
    return TraversalRequest(
        root=normalize_path(config["directory"], fallback="."),
        pattern=parsed.glob,
        directories_only=parsed.directories_only,
        include_hidden=bool(config["all"]),
        max_depth=resolve_depth(config),
    )


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(
        value: Any,
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
        strip: bool = True,
) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip() if strip else value
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_depth(value: Any, warnings: List[str], strict: bool) -> Optional[int]:
    """Accept None or a non-negative integer depth."""
    if value is None:
        return None

    depth: Optional[int] = None
    if isinstance(value, int) and not isinstance(value, bool):
        depth = value
    elif isinstance(value, str) and not strict:
        try:
            depth = int(value.strip())
            warnings.append(f"Field 'depth' converted from '{value}' to {depth}.")
        except ValueError:
            depth = None

    if depth is not None and depth >= 0:
        return depth

    msg = f"Invalid field 'depth': expected non-negative int, received {value!r}."
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")
    return None
