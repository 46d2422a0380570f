"""Integration tests for the recruitment master screen against the API"""

import asyncio

import pytest

from workmongolia.client.api_client import ApiClient
from workmongolia.client.notifications import DESTRUCTIVE, Notifier
from workmongolia.client.query_cache import QueryCache
from workmongolia.client.screen import RecruitmentMasterScreen

TEST_BASE_URL = "http://test"
INDUSTRIES_URL = "/api/v1/admin/job-options/preferred-industries"


@pytest.fixture
async def failing_screen(failing_transport):
    async with ApiClient(base_url=TEST_BASE_URL, transport=failing_transport) as client:
        yield RecruitmentMasterScreen(client, QueryCache(), Notifier())


def names(panel):
    return [record["name"] for record in panel.records]


@pytest.mark.asyncio
class TestRecruitmentMasterScreen:
    """The admin screen drives the backend through its panels"""

    async def test_load_all_empty(self, screen, recording_transport):
        assert await screen.load_all() is True

        assert all(panel.records == [] for panel in screen.panels.values())
        assert len(recording_transport.requests) == 5
        assert recording_transport.writes == []

    async def test_create_appears_after_refresh(self, screen, recording_transport):
        panel = screen["departments"]
        await panel.refresh()

        form = panel.open_create()
        form.set("name", "QA Engineer")
        assert await panel.submit() is True

        assert names(panel) == ["QA Engineer"]
        assert panel.is_form_open is False
        assert screen.notifier.latest.description == "Department added."
        assert recording_transport.writes == [("POST", "/api/v1/admin/job-options/departments")]

    async def test_invalid_form_sends_nothing(self, screen, recording_transport):
        panel = screen["skills"]
        await panel.refresh()

        panel.open_create()
        assert await panel.submit() is False

        assert "name" in panel.form.errors
        assert panel.is_form_open is True
        assert recording_transport.writes == []

    async def test_edit_updates_record(self, screen, seed_skills):
        await seed_skills()
        panel = screen["skills"]
        await panel.refresh()

        react = next(record for record in panel.records if record["name"] == "React")
        form = panel.open_edit(react)
        form.set("description", "UI library")
        assert await panel.submit() is True

        assert panel.find(react["id"])["description"] == "UI library"
        assert screen.notifier.latest.description == "Skill updated."

    async def test_confirm_delete_removes_only_that_record(self, screen, seed_skills):
        await seed_skills()
        panel = screen["skills"]
        await panel.refresh()
        before = {record["id"] for record in panel.records}

        panel.request_delete(panel.find(3))
        assert panel.is_delete_dialog_open
        assert await panel.confirm_delete() is True

        assert {record["id"] for record in panel.records} == before - {3}
        assert panel.is_delete_dialog_open is False

    async def test_cancel_delete_leaves_records(self, screen, seed_skills, recording_transport):
        await seed_skills()
        panel = screen["skills"]
        await panel.refresh()
        before = list(panel.records)

        panel.request_delete(panel.find(3))
        panel.cancel_delete()

        assert await panel.confirm_delete() is False
        assert panel.records == before
        assert recording_transport.writes == []

    async def test_toggle_flips_only_one_record(self, screen, seed_skills):
        await seed_skills()
        panel = screen["skills"]
        await panel.refresh()

        assert await panel.toggle_active(panel.find(2)) is True

        flags = {record["id"]: record["isActive"] for record in panel.records}
        assert flags == {1: True, 2: False, 3: True, 4: True}

    async def test_failed_write_keeps_list_and_notifies(self, failing_screen, seed_skills):
        await seed_skills()
        panel = failing_screen["skills"]
        await panel.refresh()
        before = list(panel.records)

        assert await panel.toggle_active(panel.find(1)) is False
        panel.request_delete(panel.find(2))
        assert await panel.confirm_delete() is False

        assert panel.records == before
        assert panel.is_delete_dialog_open is True
        errors = failing_screen.notifier.errors
        assert len(errors) == 2
        assert errors[-1].variant == DESTRUCTIVE
        assert errors[-1].description == "500: Internal server error"

    async def test_failed_submit_keeps_dialog_open(self, failing_screen):
        panel = failing_screen["departments"]
        await panel.refresh()

        panel.open_create().set("name", "Sales")
        assert await panel.submit() is False

        assert panel.is_form_open is True
        assert panel.records == []

    async def test_missing_record_triggers_reload(self, screen, seed_skills, async_client):
        await seed_skills()
        panel = screen["skills"]
        await panel.refresh()
        stale = panel.find(4)

        # Deleted behind the screen's back
        await async_client.delete(f"/api/v1/admin/skills/{stale['id']}")

        assert await panel.toggle_active(stale) is False
        assert panel.find(4) is None
        assert screen.notifier.latest.description.startswith("404")

    async def test_unmounted_panel_discards_results(self, screen, seed_skills):
        await seed_skills()
        panel = screen["skills"]

        screen.unmount()
        assert await panel.refresh() is False

        assert panel.records == []
        assert screen.notifier.items == []

    async def test_option_writes_invalidate_every_option_list(self, screen):
        await screen.load_all()

        form = screen["employment_types"].open_create()
        form.set("name", "Full-time")
        await screen["employment_types"].submit()

        assert "/api/v1/admin/job-options/departments" not in screen.cache
        assert "/api/v1/admin/job-options/employment-types" in screen.cache
        assert "/api/v1/admin/skills" in screen.cache

    async def test_search_filters_visible_records(self, screen, seed_skills):
        await seed_skills()
        panel = screen["skills"]
        await panel.refresh()

        panel.set_search("  post ")
        assert [record["name"] for record in panel.visible_records] == ["PostgreSQL"]

        panel.set_search("")
        assert len(panel.visible_records) == 4

    async def test_slow_initial_load_does_not_hide_new_record(self, held_screen, held_transport):
        panel = held_screen["departments"]
        first_load = asyncio.create_task(panel.refresh())
        await held_transport.fetched.wait()

        panel.open_create().set("name", "QA Engineer")
        assert await panel.submit() is True
        assert names(panel) == ["QA Engineer"]

        # The empty list fetched before the write arrives last
        held_transport.release.set()
        assert await first_load is False

        assert names(panel) == ["QA Engineer"]
        assert panel.is_loading is False
        assert await panel.refresh() is True
        assert names(panel) == ["QA Engineer"]

    async def test_edit_english_name_renames_preferred_industry(self, screen, async_client):
        response = await async_client.post(
            INDUSTRIES_URL, json={"nameKo": "핀테크", "nameEn": "FinTech", "nameMn": "Финтек"}
        )
        assert response.status_code == 201
        panel = screen["preferred_industries"]
        await panel.refresh()
        record = panel.find(response.json()["id"])
        assert record["name"] == "FinTech"

        form = panel.open_edit(record)
        assert form.values["name"] is None
        form.set("nameEn", "Fintech")
        assert await panel.submit() is True

        updated = panel.find(record["id"])
        assert updated["name"] == "Fintech"
        assert updated["nameEn"] == "Fintech"

    async def test_edit_keeps_explicit_industry_name(self, screen, async_client):
        response = await async_client.post(
            INDUSTRIES_URL,
            json={"name": "Banking", "nameKo": "은행", "nameEn": "Finance", "nameMn": "Санхүү"},
        )
        panel = screen["preferred_industries"]
        await panel.refresh()
        record = panel.find(response.json()["id"])

        form = panel.open_edit(record)
        form.set("nameEn", "Financial services")
        assert await panel.submit() is True

        assert panel.find(record["id"])["name"] == "Banking"
