"""
Contact form endpoints.

Visitors post the contact form to ``POST /api/contact``.  Everything
else (listing, reading, editing, answering and deleting inquiries)
belongs to the admin inbox and needs an admin token, whether it is
reached at ``/api/contact`` or at ``/api/admin/contact``.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status as http_status

from pan_eventz_api.app.api.deps import get_contact_service, write_errors
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.contact import (
    ContactResponse,
    ContactSubmissionCreate,
    ContactSubmissionUpdate,
)
from pan_eventz_api.app.services.contact_service import ContactService


router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=http_status.HTTP_404_NOT_FOUND, detail="Contact submission not found")


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def submit_contact(
    submission: ContactSubmissionCreate,
    service: ContactService = Depends(get_contact_service),
) -> Dict[str, Any]:
    """Store a contact form submission."""
    with write_errors("Failed to submit contact form"):
        return await service.create_item(submission.to_record())


@router.get("")
async def list_submissions(
    status: Optional[str] = None,
    service: ContactService = Depends(get_contact_service),
    current_user: dict = Depends(require_admin),
) -> List[Dict[str, Any]]:
    """Return inquiries, newest first, optionally filtered by ``?status=``."""
    return await service.list_items(status)


@router.get("/{submission_id}")
async def get_submission(
    submission_id: int,
    service: ContactService = Depends(get_contact_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    submission = await service.get_item(submission_id)
    if submission is None:
        raise _not_found()
    return submission


@router.put("/{submission_id}")
async def update_submission(
    submission_id: int,
    submission_in: ContactSubmissionUpdate,
    service: ContactService = Depends(get_contact_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to update contact submission"):
        submission = await service.update_item(submission_id, submission_in.to_record(partial=True))
    if submission is None:
        raise _not_found()
    return submission


@router.post("/{submission_id}/respond")
async def respond_to_submission(
    submission_id: int,
    response: ContactResponse,
    service: ContactService = Depends(get_contact_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    """Record the admin's reply and move the inquiry to its new status."""
    with write_errors("Failed to respond to contact submission"):
        submission = await service.respond(submission_id, response.message, response.status)
    if submission is None:
        raise _not_found()
    return submission


@router.delete("/{submission_id}")
async def delete_submission(
    submission_id: int,
    service: ContactService = Depends(get_contact_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, str]:
    with write_errors("Failed to delete contact submission", http_status.HTTP_500_INTERNAL_SERVER_ERROR):
        deleted = await service.delete_item(submission_id)
    if not deleted:
        raise _not_found()
    return {"message": "Contact submission deleted successfully"}
