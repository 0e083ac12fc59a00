from __future__ import annotations
from typing import Any, Callable, Dict, Sequence

AttrFunc = Callable[[Any], Any]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def list_attributes() -> list[str]:
    return sorted(_REGISTRY)

def compute_attributes(lunar, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out[name] = _REGISTRY[name](lunar)
    return out
