# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Authenticated REST API for a movie catalog."""

__version__ = "1.0.0"
