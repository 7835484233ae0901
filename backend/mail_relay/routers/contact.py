import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from mail_relay.core.mailer import MailDeliveryError, SMTPTransport, build_message, get_transport
from mail_relay.core.settings import settings

router = APIRouter(tags=["contact"])
log = logging.getLogger("uvicorn.error")

class ContactSubmission(BaseModel):
    name: str = ""
    email: str = ""
    message: str = ""

class SendOut(BaseModel):
    message: str
    details: str

class SendError(BaseModel):
    error: str
    details: str

@router.post(
    "/send-email",
    response_model=SendOut,
    responses={500: {"model": SendError}},
)
def send_email(payload: ContactSubmission, transport: SMTPTransport = Depends(get_transport)):
    log.info("[contact] received email request")
    log.info(f"[contact] form data: {payload.model_dump()}")

    try:
        msg = build_message(
            payload.name,
            payload.email,
            payload.message,
            sender=settings.sender or "",
            recipient=settings.recipient or "",
        )
        log.info("[contact] sending email...")
        info = transport.send(msg)
    except (MailDeliveryError, ValueError) as e:
        log.error(f"[contact] email error: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Error sending email", "details": str(e)},
        )

    log.info(f"[contact] email sent: {info}")
    return {"message": "Email sent successfully", "details": info}
