"""Configuration utility functions."""

from copy import deepcopy
from pathlib import Path
from typing import Any
from typing import TypeVar


T = TypeVar('T', bound=dict[str, Any])

def deep_merge(base: T, override: dict[str, Any] | None) -> T:
    """Deep merge two dictionaries.
    
    Args:
        base: Base dictionary
        override: Dictionary to override base values; None leaves base as is
        
    Returns:
        Merged copy; neither argument is modified
    """
    result = deepcopy(base)
    
    for key, value in (override or {}).items():
        if (
            key in result and
            isinstance(result[key], dict) and
            isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)
    
    return result

def resolve_path(path: str | Path, base_dir: str | Path | None = None) -> Path:
    """Resolve path relative to base directory.
    
    Args:
        path: Path to resolve
        base_dir: Base directory for relative paths
        
    Returns:
        Resolved Path object
    """
    path = Path(path).expanduser()
    if not path.is_absolute() and base_dir is not None:
        path = Path(base_dir) / path
    return path
