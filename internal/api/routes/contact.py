"""Contact form API route."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from internal.document import ContactMessageInput, IDocumentUseCase
from ..dependencies import get_documents
from ..schemas import ContactRequest, ValidationErrorResponse

router = APIRouter()

CONTACT_SUCCESS_MESSAGE = "Message sent successfully"


@router.post(
    "/contact",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}},
)
async def submit_contact(
    body: ContactRequest,
    documents: IDocumentUseCase = Depends(get_documents),
) -> Dict[str, Any]:
    document = await documents.create_contact_message(
        ContactMessageInput(
            name=body.name,
            email=body.email,
            subject=body.subject,
            message=body.message,
        )
    )
    return {"success": True, "message": CONTACT_SUCCESS_MESSAGE, "id": document.id}
