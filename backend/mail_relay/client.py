# mail_relay/client.py
"""Contact-form submission as the website performs it.

The form holds three free-text fields. A submission is one POST to the relay;
on success the user is told so and the fields are cleared, on failure the
fields are kept so the user can resubmit by hand.
"""
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import httpx

from mail_relay.core.settings import settings

log = logging.getLogger(__name__)

SUCCESS_TEXT = "Message sent successfully!"
FAILURE_PREFIX = "Failed to send message"

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass
class ContactForm:
    name: str = ""
    email: str = ""
    message: str = ""

    def to_payload(self) -> Dict[str, str]:
        return asdict(self)

    def reset(self) -> None:
        self.name = ""
        self.email = ""
        self.message = ""


@dataclass(frozen=True)
class Notification:
    ok: bool
    text: str


def _error_from_body(response: httpx.Response) -> Optional[str]:
    try:
        body: Any = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return None


async def submit_contact_form(
    form: ContactForm,
    url: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Notification:
    """POST ``form`` to the relay and report what the user should see."""
    target = url or settings.relay_url
    own_client = client is None
    http = client or httpx.AsyncClient()
    try:
        response = await http.post(target, json=form.to_payload(), headers=JSON_HEADERS)
        log.debug(f"[client] response status: {response.status_code}")

        if not response.is_success:
            error = _error_from_body(response)
            text = f"{FAILURE_PREFIX}: {error}" if error else FAILURE_PREFIX
            return Notification(ok=False, text=text)

        data = response.json()
        log.debug(f"[client] response data: {data}")
    except (httpx.HTTPError, ValueError) as e:
        log.error(f"[client] submit failed: {e!r}")
        return Notification(ok=False, text=f"{FAILURE_PREFIX}: {str(e) or 'Please try again.'}")
    finally:
        if own_client:
            await http.aclose()

    form.reset()
    return Notification(ok=True, text=SUCCESS_TEXT)


__all__ = ["ContactForm", "Notification", "submit_contact_form"]
