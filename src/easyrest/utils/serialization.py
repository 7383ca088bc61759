# easyrest/utils/serialization.py
import json
from typing import Any


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON literal {name}")


def dumps(value: Any) -> str:
    """Compact, key-sorted JSON; NaN and Infinity are refused."""
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False, allow_nan=False)


def loads(data: str | bytes) -> Any:
    """Strict JSON: the NaN/Infinity extensions are rejected with ValueError."""
    return json.loads(data, parse_constant=_reject_constant)
