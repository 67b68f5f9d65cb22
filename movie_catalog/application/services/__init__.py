# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .password_hashing import WerkzeugPasswordHasher
from .tokens import JwtTokenService

__all__ = ["JwtTokenService", "WerkzeugPasswordHasher"]
