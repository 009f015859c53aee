# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Domain Service: contact document decoder.

Purpose:
    Turn an untyped JSON document (an array of loosely-uniform person objects)
    into :class:`Contact` entities.

    Accepted element shape::

        {"fname": str, "lname": str, "email": str | [str], "phone": str}

    * ``fname`` / ``lname`` are required strings.
    * ``email`` may be a single string (wrapped into a one-element tuple), an
      array of strings (kept in order) or absent (empty tuple).
    * ``phone`` is optional; absent yields ``None``.

    Decoding is all-or-nothing: the first offending element aborts the whole
    operation with a :class:`ContactDecodeError` subclass naming the field and
    the element index.

Layer:
    domain/services
"""

from __future__ import annotations

import json
from typing import Final, NoReturn

from contact_feed.domain.entities.contact import Contact
from contact_feed.domain.exceptions.contacts import (
    MalformedDocument,
    MissingField,
    TypeMismatch,
    UnexpectedShape,
)
from contact_feed.types import JsonObject, JsonValue

__all__ = ["decode_contact", "decode_contacts", "json_type_name", "parse_contacts"]

FIELD_FIRST_NAME: Final[str] = "fname"
FIELD_LAST_NAME: Final[str] = "lname"
FIELD_EMAIL: Final[str] = "email"
FIELD_PHONE: Final[str] = "phone"


def _reject_constant(name: str) -> NoReturn:
    """Refuse the non-standard ``NaN`` / ``Infinity`` literals ``json`` accepts."""
    raise ValueError(f"Non-standard JSON constant {name!r}")


def json_type_name(value: JsonValue) -> str:
    """Return the JSON type name of a decoded value (``"object"``, ``"number"``...)."""
    # bool is an int subclass; test it first.
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def parse_contacts(raw: bytes | str) -> list[Contact]:
    """Parse raw JSON text and decode it into contacts.

    Args:
        raw: Document body as bytes (UTF-8/16/32, as accepted by ``json``) or text.

    Returns:
        list[Contact]: Contacts in document order.

    Raises:
        MalformedDocument: If ``raw`` is not valid JSON.
        UnexpectedShape: If the document is not an array of objects.
        MissingField: If a required field is absent.
        TypeMismatch: If a field has an unsupported JSON type.
    """
    try:
        document: JsonValue = json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise MalformedDocument(
            "Contact document is not valid JSON.",
            details={"error": exc.msg, "line": exc.lineno, "column": exc.colno},
        ) from exc
    except UnicodeDecodeError as exc:
        raise MalformedDocument(
            "Contact document is not valid JSON text.",
            details={"error": exc.reason, "position": exc.start},
        ) from exc
    except ValueError as exc:
        raise MalformedDocument(
            "Contact document is not valid JSON.",
            details={"error": str(exc)},
        ) from exc
    except RecursionError as exc:
        raise MalformedDocument(
            "Contact document is nested too deeply.",
            details={"error": str(exc)},
        ) from exc
    return decode_contacts(document)


def decode_contacts(document: JsonValue) -> list[Contact]:
    """Decode a parsed JSON document into contacts.

    Args:
        document: Parsed JSON value; must be an array of objects.

    Returns:
        list[Contact]: One contact per element, in input order.

    Raises:
        UnexpectedShape: If ``document`` is not an array or an element is not an object.
        MissingField: If ``fname`` or ``lname`` is absent.
        TypeMismatch: If any field has an unsupported JSON type.
    """
    if not isinstance(document, list):
        raise UnexpectedShape(
            "Contact document must be a JSON array.",
            details={"actual": json_type_name(document)},
        )
    return [decode_contact(element, index=idx) for idx, element in enumerate(document)]


def decode_contact(element: JsonValue, *, index: int | None = None) -> Contact:
    """Decode one array element into a :class:`Contact`.

    Args:
        element: Parsed JSON value for a single person entry.
        index: Position of the element in the enclosing array, for error reporting.

    Raises:
        UnexpectedShape: If ``element`` is not a JSON object.
        MissingField: If ``fname`` or ``lname`` is absent.
        TypeMismatch: If any field has an unsupported JSON type.
    """
    if not isinstance(element, dict):
        raise UnexpectedShape(
            "Contact entry must be a JSON object.",
            index=index,
            details={"actual": json_type_name(element)},
        )

    return Contact(
        first_name=_required_str(element, FIELD_FIRST_NAME, index),
        last_name=_required_str(element, FIELD_LAST_NAME, index),
        emails=_emails(element, index),
        phone=_optional_str(element, FIELD_PHONE, index),
    )


# --------------------------------------------------------------------------- #
# Field readers
# --------------------------------------------------------------------------- #


def _required_str(obj: JsonObject, name: str, index: int | None) -> str:
    if name not in obj:
        raise MissingField(
            f"Contact entry is missing required field '{name}'.",
            field=name,
            index=index,
        )
    return _expect_str(obj[name], name, index)


def _optional_str(obj: JsonObject, name: str, index: int | None) -> str | None:
    if name not in obj:
        return None
    return _expect_str(obj[name], name, index)


def _expect_str(value: JsonValue, name: str, index: int | None) -> str:
    if not isinstance(value, str):
        actual = json_type_name(value)
        raise TypeMismatch(
            f"Field '{name}' must be a string, got {actual}.",
            field=name,
            index=index,
            expected="string",
            actual=actual,
        )
    return value


def _emails(obj: JsonObject, index: int | None) -> tuple[str, ...]:
    if FIELD_EMAIL not in obj:
        return ()

    value = obj[FIELD_EMAIL]
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list):
        return tuple(
            _expect_str(item, f"{FIELD_EMAIL}[{pos}]", index) for pos, item in enumerate(value)
        )

    actual = json_type_name(value)
    raise TypeMismatch(
        f"Field '{FIELD_EMAIL}' must be a string or an array of strings, got {actual}.",
        field=FIELD_EMAIL,
        index=index,
        expected="string | array<string>",
        actual=actual,
    )
