"""
resthandler: Request Payload
============================

What:  Read-only view of a parsed JSON request body with typed accessors.
How:   The route layer builds a Payload from the raw body of POST/PUT
       requests; handlers pull fields out by name and type.
Who:   Passed to create_resource() and update_resource().

Accessor contract:
    payload.get_string("foobar")              → str, or ValidationError
    payload.get_string("foobar", default="")  → "" when the field is absent

    A field that is present but has the wrong type is always an error,
    even when a default is given.
"""

import json
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional

from resthandler.exceptions import ValidationError

_MISSING = object()


class Payload(Mapping):
    """Immutable mapping of body fields for a single request."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(data or {})

    @classmethod
    def from_body(cls, body: bytes) -> "Payload":
        """
        Parse a raw request body.

        An empty body yields an empty payload. Anything that is not a JSON
        object at the top level raises ValidationError.
        """
        if not body or not body.strip():
            return cls()
        try:
            data = json.loads(body)
        except (ValueError, UnicodeDecodeError) as e:
            raise ValidationError(
                message="Request body is not valid JSON",
                context={"reason": str(e)},
            )
        if not isinstance(data, dict):
            raise ValidationError(
                message="Request body must be a JSON object",
                context={"received": type(data).__name__},
            )
        return cls(data)

    # ── Mapping protocol ──────────────────────────────────────────────────

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Payload({self._data!r})"

    # ── Typed accessors ───────────────────────────────────────────────────

    def get_string(self, key: str, default: Any = _MISSING) -> str:
        return self._get_typed(key, (str,), "string", default)

    def get_int(self, key: str, default: Any = _MISSING) -> int:
        if key not in self._data and default is not _MISSING:
            return default
        value = self._get_typed(key, (int,), "integer", default)
        if isinstance(value, bool):
            raise self._type_error(key, "integer")
        return value

    def get_float(self, key: str, default: Any = _MISSING) -> float:
        if key not in self._data and default is not _MISSING:
            return default
        value = self._get_typed(key, (int, float), "number", default)
        if isinstance(value, bool):
            raise self._type_error(key, "number")
        return float(value)

    def get_bool(self, key: str, default: Any = _MISSING) -> bool:
        return self._get_typed(key, (bool,), "boolean", default)

    def get_list(self, key: str, default: Any = _MISSING) -> List[Any]:
        return self._get_typed(key, (list,), "array", default)

    def get_dict(self, key: str, default: Any = _MISSING) -> Dict[str, Any]:
        return self._get_typed(key, (dict,), "object", default)

    def _get_typed(self, key: str, types: tuple, expected: str, default: Any) -> Any:
        if key not in self._data:
            if default is _MISSING:
                raise ValidationError(
                    message=f"Field '{key}' is required",
                    field=key,
                    context={"expected": expected},
                )
            return default
        value = self._data[key]
        if not isinstance(value, types):
            raise self._type_error(key, expected)
        return value

    @staticmethod
    def _type_error(key: str, expected: str) -> ValidationError:
        article = "an" if expected[0] in "aeiou" else "a"
        return ValidationError(
            message=f"Field '{key}' must be {article} {expected}",
            field=key,
            context={"expected": expected},
        )
