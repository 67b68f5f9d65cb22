# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Domain layer for the movie catalog."""

from .exceptions import InvariantViolation, InvariantViolationError

__all__ = [
    "InvariantViolation",
    "InvariantViolationError",
]
