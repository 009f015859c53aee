from __future__ import annotations

import logging
from pathlib import Path

import httpx
import pytest
import respx

from contact_feed.adapters.gateways.contact_gateway import FileContactGateway, HttpContactGateway
from contact_feed.domain.entities.contact import Contact
from contact_feed.domain.exceptions.contacts import (
    ContactSourceError,
    ContactSourceNotFound,
    MalformedDocument,
    MissingField,
)
from contact_feed.infrastructure.external_apis.contact_feed.client import ContactFeedClient
from contact_feed.infrastructure.external_apis.contact_feed.settings import ContactFeedSettings
from contact_feed.infrastructure.resilience.retry import RetryPolicy

FEED_URL = "https://feeds.example.test/contacts.json"


def _client() -> ContactFeedClient:
    return ContactFeedClient(
        ContactFeedSettings(url=FEED_URL),
        retry_policy=RetryPolicy(total=0, base=0.0, cap=0.0, jitter=False),
    )


@pytest.mark.asyncio
async def test_file_gateway_decodes_document(contacts_path: Path) -> None:
    gateway = FileContactGateway(contacts_path)

    contacts = await gateway.fetch_contacts()

    assert gateway.source == str(contacts_path)
    assert contacts[0] == Contact(
        "Ada", "Lovelace", ("ada@analytical.example",), "+44 20 7946 0000"
    )
    assert len(contacts) == 3


@pytest.mark.asyncio
async def test_file_gateway_missing_file(tmp_path: Path) -> None:
    gateway = FileContactGateway(tmp_path / "absent.json")

    with pytest.raises(ContactSourceNotFound) as ei:
        await gateway.fetch_contacts()

    assert ei.value.details["path"].endswith("absent.json")


@pytest.mark.asyncio
async def test_file_gateway_directory_is_source_error(tmp_path: Path) -> None:
    with pytest.raises(ContactSourceError):
        await FileContactGateway(tmp_path).fetch_contacts()


@pytest.mark.asyncio
async def test_file_gateway_propagates_decode_errors(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text('[{"fname": "A"}]', encoding="utf-8")

    with pytest.raises(MissingField) as ei:
        await FileContactGateway(path).fetch_contacts()

    assert ei.value.field == "lname"


@pytest.mark.asyncio
@respx.mock
async def test_http_gateway_decodes_feed(sample_bytes: bytes) -> None:
    respx.get(FEED_URL).mock(return_value=httpx.Response(200, content=sample_bytes))

    async with _client() as client:
        contacts = await HttpContactGateway(client).fetch_contacts()

    assert [c.last_name for c in contacts] == ["Lovelace", "Hopper", "Turing"]


@pytest.mark.asyncio
@respx.mock
async def test_http_gateway_explicit_url() -> None:
    url = "https://mirror.example.test/people.json"
    respx.get(url).mock(return_value=httpx.Response(200, json=[{"fname": "A", "lname": "B"}]))

    async with _client() as client:
        gateway = HttpContactGateway(client, url=url)
        contacts = await gateway.fetch_contacts()

    assert gateway.source == url
    assert contacts == [Contact("A", "B")]


@pytest.mark.asyncio
@respx.mock
async def test_http_gateway_non_json_body_is_malformed() -> None:
    respx.get(FEED_URL).mock(return_value=httpx.Response(200, content=b"<html>oops</html>"))

    async with _client() as client:
        with pytest.raises(MalformedDocument):
            await HttpContactGateway(client).fetch_contacts()


@pytest.mark.asyncio
@respx.mock
async def test_http_gateway_propagates_not_found() -> None:
    respx.get(FEED_URL).mock(return_value=httpx.Response(404))

    async with _client() as client:
        with pytest.raises(ContactSourceNotFound):
            await HttpContactGateway(client).fetch_contacts()


@pytest.mark.asyncio
async def test_gateway_logs_through_json_logger(
    contacts_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    name = "contact_feed.adapters.gateways.contact_gateway"
    caplog.set_level(logging.INFO, logger=name)

    await FileContactGateway(contacts_path).fetch_contacts()

    [record] = [r for r in caplog.records if r.getMessage() == "contacts.fetch.success"]
    assert record.name == name
    assert record.extra == {"source": str(contacts_path), "count": 3}
