# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""intlsync CLI package exports."""

from __future__ import annotations

from typing import Final

from .app import app
from .shared import CLIError, SyncCLIOptions

__all__: Final[list[str]] = ["CLIError", "SyncCLIOptions", "app"]
