"""Tests for the site settings sections."""

import asyncio
import logging

import pytest

from pan_eventz_api.app.services.settings_service import SECTIONS, SettingsService


class TestSettingsService:
    def test_defaults_for_fresh_store(self, storage):
        service = SettingsService(storage)
        general = asyncio.run(service.get_section("general"))
        assert general["siteName"] == "Pan Eventz"

    def test_unknown_section(self, storage):
        with pytest.raises(ValueError):
            asyncio.run(SettingsService(storage).get_section("billing"))

    def test_update_is_shallow_merge(self, storage):
        service = SettingsService(storage)
        asyncio.run(service.update_section("business", {"currency": "USD"}))
        values = asyncio.run(service.update_section("business", {"businessHours": {"start": "10:00"}}))
        assert values["currency"] == "USD"
        assert values["businessHours"] == {"start": "10:00"}
        assert values["timezone"] == "Asia/Kolkata"

    def test_update_is_logged(self, storage, caplog):
        with caplog.at_level(logging.INFO, logger="pan_eventz_api.app.services.settings_service"):
            asyncio.run(SettingsService(storage).update_section("business", {"currency": "USD"}))
        assert "Settings section business updated" in caplog.text


class TestSettingsRoutes:
    def test_get_all_sections(self, client):
        body = client.get("/api/settings").json()
        assert tuple(body) == SECTIONS

    def test_get_one_section(self, client):
        assert client.get("/api/settings/notifications").json()["inquiryAlerts"] is True
        resp = client.get("/api/settings/billing")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Settings section not found"}

    def test_update_requires_admin(self, client):
        assert client.put("/api/settings/general", json={"siteName": "X"}).status_code == 401

    def test_update(self, client, admin_headers):
        resp = client.put("/api/admin/settings/general", json={"siteName": "Pan Eventz Mumbai"}, headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json()["siteName"] == "Pan Eventz Mumbai"
        assert client.get("/api/settings/general").json()["siteName"] == "Pan Eventz Mumbai"

    def test_update_unknown_section(self, client, admin_headers):
        resp = client.put("/api/settings/billing", json={"a": 1}, headers=admin_headers)
        assert resp.status_code == 404
