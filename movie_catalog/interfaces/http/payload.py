# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import request


def request_payload(*, allow_form: bool = False) -> Any:
    """JSON body of the current request, or its urlencoded form when allowed."""
    payload = request.get_json(silent=True)
    if payload is None and allow_form and request.form:
        payload = request.form.to_dict()
    return payload if payload is not None else {}


__all__ = ["request_payload"]
