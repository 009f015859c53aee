# Copyright (c)
# SPDX-License-Identifier: MIT
"""contact-feed CLI: browse a JSON contact document.

Commands:
    list   Print one line per contact (name and first email).
    show   Print every field of one contact.

Environment:
    CONTACT_FEED_URL          Default document URL when neither --url nor --file is given.
    CONTACT_FEED_TIMEOUT_S    Per-request timeout in seconds.
    CONTACT_FEED_MAX_RETRIES  Retries for transient HTTP failures.
    LOG_LEVEL                 Root log level (JSON logs go to stderr).

Exit codes:
    0  success
    1  the document could not be retrieved
    2  the document could not be decoded (also Typer usage errors, e.g. a bad LOG_LEVEL)
    3  the requested index does not exist
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer
from pydantic import ValidationError

from contact_feed.adapters.gateways.contact_gateway import FileContactGateway, HttpContactGateway
from contact_feed.adapters.presenters.contact_presenter import ContactPresenter
from contact_feed.application.schemas.dto.contacts import ContactListDTO
from contact_feed.application.use_cases.load_contacts import LoadContacts
from contact_feed.config.settings import get_settings
from contact_feed.domain.exceptions.contacts import (
    ContactDecodeError,
    ContactSourceError,
    ContactSourceNotFound,
)
from contact_feed.infrastructure.external_apis.contact_feed.client import ContactFeedClient
from contact_feed.infrastructure.external_apis.contact_feed.settings import ContactFeedSettings
from contact_feed.infrastructure.logging.logger import configure_root_logging, get_json_logger

EXIT_SOURCE_ERROR = 1
EXIT_DECODE_ERROR = 2
EXIT_INDEX_ERROR = 3

log = get_json_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main() -> None:
    """Fetch a JSON contact list from a URL or file and display it."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        errors = "; ".join(str(err["msg"]) for err in exc.errors())
        raise typer.BadParameter(errors, param_hint="LOG_LEVEL / ENVIRONMENT") from exc
    configure_root_logging(settings.log_level)


async def _load(url: str | None, file: Path | None) -> ContactListDTO:
    """Run the ``LoadContacts`` use case against the selected source."""
    if file is not None:
        return await LoadContacts(FileContactGateway(file)).execute()

    settings = ContactFeedSettings()
    async with ContactFeedClient(settings) as client:
        return await LoadContacts(HttpContactGateway(client, url=url)).execute()


def _load_or_exit(url: str | None, file: Path | None) -> ContactListDTO:
    """Load contacts, mapping domain errors to operator-friendly exits."""
    if url is not None and file is not None:
        raise typer.BadParameter("use either --url or --file, not both")

    try:
        return asyncio.run(_load(url, file))
    except ContactDecodeError as exc:
        location = []
        if exc.index is not None:
            location.append(f"entry {exc.index}")
        if exc.field is not None:
            location.append(f"field '{exc.field}'")
        suffix = f" ({', '.join(location)})" if location else ""
        typer.echo(f"error[{exc.code}]: {exc.message}{suffix}", err=True)
        raise typer.Exit(code=EXIT_DECODE_ERROR) from exc
    except (ContactSourceNotFound, ContactSourceError) as exc:
        typer.echo(f"error[{exc.code}]: {exc.message}", err=True)
        raise typer.Exit(code=EXIT_SOURCE_ERROR) from exc


@app.command("list")
def list_contacts(
    url: str | None = typer.Option(None, help="Document URL (defaults to CONTACT_FEED_URL)."),  # noqa: B008
    file: Path | None = typer.Option(  # noqa: B008
        None, exists=False, dir_okay=False, help="Read the document from a local file."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print decoded contacts as JSON."),  # noqa: B008
) -> None:
    """List every contact with its first email address."""
    dto = _load_or_exit(url, file)
    log.info("cli.list.done", extra={"extra": {"source": dto.source, "count": dto.count}})
    if as_json:
        typer.echo(json.dumps([item.model_dump(mode="json") for item in dto.items], indent=2))
        return
    typer.echo(ContactPresenter().render_list(dto))


@app.command("show")
def show_contact(
    index: int = typer.Argument(..., min=0, help="Zero-based position in the list."),  # noqa: B008
    url: str | None = typer.Option(None, help="Document URL (defaults to CONTACT_FEED_URL)."),  # noqa: B008
    file: Path | None = typer.Option(  # noqa: B008
        None, exists=False, dir_okay=False, help="Read the document from a local file."
    ),
) -> None:
    """Show every field of one contact."""
    dto = _load_or_exit(url, file)
    try:
        text = ContactPresenter().render_detail(dto, index)
    except IndexError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=EXIT_INDEX_ERROR) from exc
    typer.echo(text)


if __name__ == "__main__":  # pragma: no cover
    app()
