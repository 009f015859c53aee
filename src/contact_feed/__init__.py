# Copyright (c)
# SPDX-License-Identifier: MIT
"""contact-feed: fetch, decode and present contact lists published as JSON."""

from __future__ import annotations

__version__ = "0.1.0"
