"""Team page endpoints: public listing, admin create/update/delete."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from pan_eventz_api.app.api.deps import get_team_service, with_fallback, write_errors
from pan_eventz_api.app.core.fallbacks import TEAM_FALLBACK
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.about import TeamMemberCreate, TeamMemberUpdate
from pan_eventz_api.app.services.team_service import TeamService


router = APIRouter()


@router.get("")
async def list_team(service: TeamService = Depends(get_team_service)) -> List[Dict[str, Any]]:
    return await with_fallback(service.list_items, TEAM_FALLBACK, "team members")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_team_member(
    member_in: TeamMemberCreate,
    service: TeamService = Depends(get_team_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to create team member"):
        return await service.create_item(member_in.to_record())


@router.put("/{member_id}")
async def update_team_member(
    member_id: int,
    member_in: TeamMemberUpdate,
    service: TeamService = Depends(get_team_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to update team member"):
        member = await service.update_item(member_id, member_in.to_record(partial=True))
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team member not found")
    return member


@router.delete("/{member_id}")
async def delete_team_member(
    member_id: int,
    service: TeamService = Depends(get_team_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, str]:
    with write_errors("Failed to delete team member", status.HTTP_500_INTERNAL_SERVER_ERROR):
        deleted = await service.delete_item(member_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team member not found")
    return {"message": "Team member deleted successfully"}
