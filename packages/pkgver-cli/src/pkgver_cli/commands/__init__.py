# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import check, version

__all__ = ["check", "version"]
