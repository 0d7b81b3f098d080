"""
Input records for tree construction.

A record is a flat row with an ``id``, an optional ``parent`` id and any
number of extra payload fields. Rows arrive either as plain mappings or
as ``Record`` instances; both are validated through the same model.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, ValidationError

from arbor.errors import InvalidRecordError

NodeId = Union[int, str]

_STRUCTURAL_FIELDS = ("id", "parent")


class Record(BaseModel):
    """One flat input row.

    Extra fields are kept as payload. Identifiers must be ``int`` or
    ``str``; ``bool`` and floats are rejected so that mapping keys stay
    unambiguous.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: Union[StrictInt, StrictStr]
    parent: Union[StrictInt, StrictStr, None] = None

    @property
    def payload(self) -> dict[str, Any]:
        """Fields as supplied, extras included and an unset parent left out.

        Values are returned as they are; nested models are not dumped.
        """
        payload = dict(self)
        if "parent" not in self.model_fields_set:
            del payload["parent"]
        return payload


def coerce_record(row: Any, position: int) -> tuple[Record, dict[Any, Any]]:
    """Validate one input row.

    Args:
        row: A mapping or a ``Record``.
        position: Index of the row in the input, used in error messages.

    Returns:
        The validated record and a copy of the row to keep as node payload.

    Raises:
        InvalidRecordError: If the row is not a mapping or its ``id`` or
            ``parent`` fails validation. Other fields are never inspected.
    """
    if isinstance(row, Record):
        return row, row.payload

    if not isinstance(row, Mapping):
        raise InvalidRecordError(
            position, row, f"expected a mapping, got {type(row).__name__}"
        )

    try:
        record = Record.model_validate(
            {key: row[key] for key in _STRUCTURAL_FIELDS if key in row}
        )
    except ValidationError as exc:
        raise InvalidRecordError(position, row, _describe(exc)) from exc

    return record, dict(row)


def _describe(exc: ValidationError) -> str:
    """Flatten pydantic errors into one line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "record"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
