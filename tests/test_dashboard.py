"""Tests for the admin dashboard summary."""

import asyncio
from datetime import datetime, timezone

from pan_eventz_api.app.core.file_storage import CONTACT_SUBMISSIONS, EVENTS
from pan_eventz_api.app.services.dashboard_service import DashboardService


NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


class TestDashboardService:
    def test_counts(self, storage):
        storage.write_collection(
            EVENTS,
            [
                {"id": 1, "title": "Past", "eventDate": "2024-05-01"},
                {"id": 2, "title": "Today", "eventDate": "2024-06-15"},
                {"id": 3, "title": "Future", "date": "2024-09-01T18:00:00"},
                {"id": 4, "title": "Undated"},
            ],
        )
        storage.write_collection(
            CONTACT_SUBMISSIONS,
            [
                {"id": 1, "createdAt": "2024-06-14T09:00:00.000Z"},
                {"id": 2, "createdAt": "2024-06-01T09:00:00.000Z"},
                {"id": 3, "createdAt": "not a date"},
            ],
        )
        summary = asyncio.run(DashboardService(storage).summary(now=NOW))
        assert summary["stats"] == {
            "totalEvents": 4,
            "upcomingEvents": 2,
            "totalInquiries": 3,
            "newInquiries": 1,
        }
        assert [event["id"] for event in summary["recentEvents"]] == [3, 2, 1, 4]

    def test_recent_lists_are_capped(self, storage):
        storage.write_collection(
            CONTACT_SUBMISSIONS,
            [{"id": i, "createdAt": f"2024-06-{i:02d}T00:00:00.000Z"} for i in range(1, 9)],
        )
        summary = asyncio.run(DashboardService(storage).summary(now=NOW))
        assert [row["id"] for row in summary["recentInquiries"]] == [8, 7, 6, 5, 4]


class TestDashboardRoute:
    def test_requires_admin(self, client):
        assert client.get("/api/admin/dashboard").status_code == 401
        assert client.get("/api/dashboard").status_code == 404

    def test_empty_store(self, client, admin_headers):
        body = client.get("/api/admin/dashboard", headers=admin_headers).json()
        assert body["stats"]["totalEvents"] == 0
        assert body["recentEvents"] == []

    def test_failure_serves_sample(self, client, admin_headers, monkeypatch):
        async def broken(self, now=None):
            raise RuntimeError("disk gone")

        monkeypatch.setattr(DashboardService, "summary", broken)
        body = client.get("/api/admin/dashboard", headers=admin_headers).json()
        assert body["stats"]["totalEvents"] == 125
        assert len(body["recentInquiries"]) == 5
