"""Types of the in-memory namelist document."""

from __future__ import annotations

from typing import Any

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr, TypeAdapter, ValidationError

from f90namelists.errors import NamelistValueError


NamelistScalar = str | int | float | bool
NamelistValue = NamelistScalar | list[NamelistScalar]
# insertion order of both mappings is the order groups and variables are written in
NamelistGroup = dict[str, NamelistValue]
NamelistDocument = dict[str, NamelistGroup]

_StrictScalar = StrictBool | StrictInt | StrictFloat | StrictStr

DocumentAdapter: TypeAdapter[NamelistDocument] = TypeAdapter(
    dict[StrictStr, dict[StrictStr, _StrictScalar | list[_StrictScalar]]]
)


def validate_document(document: Any) -> NamelistDocument:
    """Return a validated copy of ``document``.

    Groups must map variable names to scalars or flat lists of scalars; nested
    groups and other value types are rejected. A group named ``end`` is
    rejected too, since ``&end`` reads back as a group close.
    """
    try:
        validated = DocumentAdapter.validate_python(document)
    except ValidationError as exc:
        raise NamelistValueError(f"Invalid namelist document: {exc}") from exc
    for name in validated:
        if name.lower() == "end":
            raise NamelistValueError(f"Invalid namelist document: group name '{name}' is reserved")
    return validated


__all__ = [
    "DocumentAdapter",
    "NamelistDocument",
    "NamelistGroup",
    "NamelistScalar",
    "NamelistValue",
    "validate_document",
]
