# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError

_JSON_SCALARS = (str, int, float, bool, type(None))


def _jsonable_ctx(ctx: dict[str, Any]) -> dict[str, Any]:
    return {
        key: value if isinstance(value, _JSON_SCALARS) else str(value)
        for key, value in ctx.items()
    }


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors_list = []
    fields_set = set()

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        if field_path:
            fields_set.add(field_path)

        error_entry: dict[str, Any] = {
            "field": field_path or "unknown",
            "type": error.get("type", "value_error"),
            "msg": error.get("msg", ""),
        }

        if "ctx" in error:
            error_entry["ctx"] = _jsonable_ctx(error["ctx"])

        errors_list.append(error_entry)

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def raise_validation_error(exc: PydanticValidationError, *, message: str | None = None) -> NoReturn:
    context = format_pydantic_errors(exc)
    raise ValidationError(message=message, context=context) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
