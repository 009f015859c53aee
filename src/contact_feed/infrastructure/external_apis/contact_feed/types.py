# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Contact Feed Types.

Purpose:
    Describe the wire format of the JSON contact document::

        [{"fname": str, "lname": str, "email": str | [str], "phone": str}, ...]

Layer:
    infrastructure

Notes:
    These types document the expected shape only; the decoder validates every
    field at runtime because feeds are loosely typed.
"""

from __future__ import annotations

from typing import NotRequired, TypeAlias, TypedDict


class ContactPayload(TypedDict):
    """Single person entry as published by the feed."""

    fname: str
    lname: str
    email: NotRequired[str | list[str]]
    phone: NotRequired[str]


ContactDocument: TypeAlias = list[ContactPayload]
