# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    BLANK = "blank"
    INVALID_DATE = "invalid_date"
    NULL_NOT_ALLOWED = "null_not_allowed"
    ACTORS_EMPTY = "actors_empty"


__all__ = ["ValidationErrorType"]
