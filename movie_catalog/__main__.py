# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from movie_catalog.app import main

main()
