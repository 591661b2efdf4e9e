"""Summary email endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from condensify.dependencies import get_mailer
from condensify.exceptions import EmailDeliveryError
from condensify.infrastructure.interfaces import Mailer
from condensify.logging import setup_logging
from condensify.request_models import EmailRequest
from condensify.response_models import EmailResponse

logger = setup_logging()

router = APIRouter(tags=["email"])

MailerDep = Annotated[Mailer, Depends(get_mailer)]


@router.post("/send-email", response_model=EmailResponse)
def send_email(request: EmailRequest, mailer: MailerDep) -> EmailResponse:
    """Emails a summary to the requested recipient."""
    if not request.text or not request.to:
        logger.warning(
            "Email request rejected",
            extra={"has_text": bool(request.text), "has_recipient": bool(request.to)},
        )
        return EmailResponse(success=False, error="Missing text or recipient")

    try:
        mailer.send(request.text, request.to)
    except EmailDeliveryError as e:
        return EmailResponse(success=False, error=str(e))
    except Exception as e:
        logger.exception("Email error", extra={"recipient": request.to})
        return EmailResponse(success=False, error=str(e))

    return EmailResponse(success=True)
