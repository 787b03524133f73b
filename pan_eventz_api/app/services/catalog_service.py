"""
Service layer for the service pages (corporate, wedding, sports, ...).

A service row lives in the ``services`` table; its bullet points and
process steps live in ``serviceFeatures`` and ``serviceProcessSteps``
keyed by ``serviceId``.  Reads return the service with both child lists
attached, process steps ordered by ``order``.  Deleting a service also
deletes its children, since the in-memory database does not cascade.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pan_eventz_api.app.core.db import eq, service_features, service_process_steps, services

from .base import TableService, sort_by_order


logger = logging.getLogger(__name__)


class CatalogService(TableService):
    """Service for managing services and their features and steps."""

    table = services

    def _with_children(self, service: Dict[str, Any]) -> Dict[str, Any]:
        features = self.db.query[service_features].find_many(
            where=eq(service_features.c.serviceId, service["id"])
        )
        steps = self.db.query[service_process_steps].find_many(
            where=eq(service_process_steps.c.serviceId, service["id"])
        )
        return {**service, "features": features, "processSteps": sort_by_order(steps)}

    async def list_items(self) -> List[Dict[str, Any]]:
        return [self._with_children(service) for service in self.db.query[services].find_many()]

    async def get_by_slug(self, slug: str) -> Optional[Dict[str, Any]]:
        service = self.db.query[services].find_first(where=eq(services.c.slug, slug))
        if service is None:
            return None
        return self._with_children(service)

    async def create_service(
        self,
        data: Mapping[str, Any],
        features: Iterable[Mapping[str, Any]] = (),
        process_steps: Iterable[Mapping[str, Any]] = (),
    ) -> Dict[str, Any]:
        """Insert a service and its children, returning the assembled record."""
        service = await self.create_item(data)
        feature_rows = [{**feature, "serviceId": service["id"]} for feature in features]
        step_rows = [{**step, "serviceId": service["id"]} for step in process_steps]
        if feature_rows:
            self.db.insert(service_features).values(feature_rows)
        if step_rows:
            self.db.insert(service_process_steps).values(step_rows)
        return self._with_children(service)

    async def delete_item(self, item_id: int) -> bool:
        deleted = await super().delete_item(item_id)
        if deleted:
            for child in (service_features, service_process_steps):
                while self.db.delete(child).where(eq(child.c.serviceId, item_id)).returning():
                    pass
            logger.debug("Removed features and steps of service %s", item_id)
        return deleted
