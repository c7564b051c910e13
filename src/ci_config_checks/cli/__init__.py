# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Command-line interface for CI configuration checks."""
