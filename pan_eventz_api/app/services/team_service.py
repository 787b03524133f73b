"""Service layer for the team page (``teamMembers`` file collection)."""

from typing import Any, Dict, List

from pan_eventz_api.app.core.file_storage import TEAM_MEMBERS

from .base import FileCollectionService, sort_by_order


class TeamService(FileCollectionService):
    """Service for managing team members, listed by ``order``."""

    collection = TEAM_MEMBERS

    async def list_items(self) -> List[Dict[str, Any]]:
        return sort_by_order(self.storage.get_all(self.collection))
