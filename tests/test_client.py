from __future__ import annotations

import asyncio

import httpx
import pytest

from campaign_api.client import CampaignClient
from campaign_api.main import app

from conftest import read_document, write_document


@pytest.fixture()
def campaign_client(api_env):
    return CampaignClient(base_url="http://testserver", transport=httpx.ASGITransport(app=app))


def test_push_and_fetch_round_trip(campaign_client):
    async def scenario():
        pushed = await campaign_client.push_document({"reports": [{"id": "a", "ctr": 0.4}]})
        upserted = await campaign_client.push_report("b", {"id": "b"})
        document = await campaign_client.get_campaigns()
        report = await campaign_client.get_report("a")
        missing = await campaign_client.get_report("zzz")
        return pushed, upserted, document, report, missing

    pushed, upserted, document, report, missing = asyncio.run(scenario())

    assert pushed["reports"] == 1
    assert upserted["outcome"] == "inserted"
    assert document == {"reports": [{"id": "a", "ctr": 0.4}, {"id": "b"}]}
    assert report == {"id": "a", "ctr": 0.4}
    assert missing is None


def test_refresh_and_health(campaign_client):
    async def scenario():
        refreshed = await campaign_client.refresh()
        health = await campaign_client.health()
        return refreshed, health

    refreshed, health = asyncio.run(scenario())

    assert refreshed["success"] is True
    assert refreshed["reports"] == 0
    assert health["cache"]["exists"] is True


def test_rejected_push_raises(campaign_client):
    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        asyncio.run(campaign_client.push_document({"items": []}))

    assert exc_info.value.response.status_code == 400


@pytest.mark.parametrize("report_id", ["a?b", "q3#search", "spring sale", "50%off"])
def test_report_ids_with_reserved_characters(campaign_client, api_env, report_id):
    write_document(api_env, {"reports": [{"id": "a"}, {"id": "q3"}, {"id": "spring"}, {"id": "50"}]})

    async def scenario():
        missing = await campaign_client.get_report(report_id)
        pushed = await campaign_client.push_report(report_id, {"id": report_id, "v": 1})
        found = await campaign_client.get_report(report_id)
        return missing, pushed, found

    missing, pushed, found = asyncio.run(scenario())

    assert missing is None
    assert pushed["outcome"] == "inserted"
    assert found == {"id": report_id, "v": 1}
    assert read_document(api_env)["reports"][-1] == {"id": report_id, "v": 1}
