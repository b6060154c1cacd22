from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

logger = logging.getLogger(__name__)

# Sentinel for "key not there", distinct from an explicit None/""/0.
MISSING = object()

PathSpec = Union[str, Sequence[str]]


def get_path(data: Any, path: str, default: Any = None) -> Any:
    """
    Walk a dotted path ("essential_indicators.anti_corruption_policy.has_policy").

    Any step that is not a mapping, or a key that is not there, resolves
    to `default`. An empty path returns `data` itself.
    """
    if not path:
        return data

    current = data
    for part in path.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return default
        current = current[part]
    return current


def is_present(value: Any) -> bool:
    """A value is present unless it is absent or an explicit null."""
    return value is not MISSING and value is not None


def _as_aliases(paths: PathSpec) -> Sequence[str]:
    if isinstance(paths, str):
        return (paths,)
    return tuple(paths)


def resolve(data: Any, paths: PathSpec, default: Any = None) -> Any:
    """
    Return the value at the first present path of an ordered alias list.

    The canonical path goes first and legacy paths after. A present but
    empty value ({}, [], "") under an earlier alias still wins: only
    absent/null values fall through to the next alias.
    """
    for path in _as_aliases(paths):
        value = get_path(data, path, MISSING)
        if is_present(value):
            return value
    return default


def resolve_block(
    data: Any,
    aliases: Iterable[str],
    label: Optional[str] = None,
) -> Mapping[str, Any]:
    """
    Resolve a sub-block (topic, section) through its aliases, defaulting to {}.

    Non-mapping values are treated like missing data.
    """
    aliases = tuple(aliases)
    value = resolve(data, aliases)
    if isinstance(value, Mapping):
        return value

    if value is not None:
        logger.debug(
            "resolve_block: %s under %s is %s, not a mapping; using empty block",
            label or aliases[0],
            list(aliases),
            type(value).__name__,
        )
    else:
        logger.debug(
            "resolve_block: no data for %s under %s",
            label or aliases[0],
            list(aliases),
        )
    return {}
