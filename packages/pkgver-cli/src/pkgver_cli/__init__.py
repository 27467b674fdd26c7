# SPDX-License-Identifier: MIT
"""Command line interface for pkgver."""

__version__ = "0.1.0"
