# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m pystree`` to behave like the console script."""

from __future__ import annotations

from .cli.main import main

if __name__ == "__main__":  # pragma: no cover - exercised through the console script
    main()
