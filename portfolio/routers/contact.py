from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from portfolio.config import settings
from portfolio.contact import (
    HONEYPOT_FIELD,
    REASONS,
    MethodNotAllowed,
    Persisted,
    PersistenceFailed,
    SpamDetected,
    ValidationFailed,
    is_spam,
    sanitize_form,
    to_json_response,
    validate_fields,
)
from portfolio.contact.rules import rules_as_dict
from portfolio.schemas.contact import ContactRecord
from portfolio.services.client_ip import get_client_ip, get_user_agent
from portfolio.services.contact_store import (
    ContactStore,
    PersistenceError,
    get_contact_store,
)
from portfolio.services.mailer import Mailer, NotificationError, get_mailer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["contact"])
templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.get("/contact", response_class=HTMLResponse)
def contact_page(request: Request):
    """Render the contact form with its honeypot and mirrored rules."""
    return templates.TemplateResponse(
        request,
        "contact.html",
        {
            "action": settings.contact_endpoint,
            "reasons": REASONS,
            "honeypot": HONEYPOT_FIELD,
            "rules": rules_as_dict(),
        },
    )


@router.get("/contact/rules.json", response_class=JSONResponse)
def contact_rules() -> dict:
    """Shared validation rules so the browser can check fields before posting."""
    return rules_as_dict()


@router.api_route(settings.contact_endpoint, methods=ALL_METHODS, name="process_form")
async def process_form(
    request: Request,
    store: ContactStore = Depends(get_contact_store),
    notifier: Mailer = Depends(get_mailer),
) -> JSONResponse:
    """Validate and store a contact form submission."""
    if request.method != "POST":
        return to_json_response(MethodNotAllowed(request.method))

    form = await request.form()
    fields = sanitize_form(form)
    ip_address = get_client_ip(request, settings.trust_forwarded_for)

    # Validation answers first; the honeypot is only consulted for otherwise
    # valid submissions, so invalid spam gets the validation response.
    errors = validate_fields(fields)
    if errors:
        logger.info("Contact submission rejected with %d error(s)", len(errors))
        return to_json_response(ValidationFailed(errors))

    if is_spam(form):
        logger.warning("Contact submission flagged as spam from %s", ip_address)
        return to_json_response(SpamDetected())

    # Rate limiting is not enforced; per-IP throttling would slot in here.

    record = ContactRecord.from_fields(
        fields, ip_address=ip_address, user_agent=get_user_agent(request)
    )
    try:
        new_id = await run_in_threadpool(store.save, record)
    except PersistenceError as exc:
        return to_json_response(
            PersistenceFailed(exc.detail), debug=settings.expose_diagnostics
        )

    try:
        await run_in_threadpool(notifier.notify_new_message, record)
    except NotificationError as exc:
        logger.warning("Contact notification for id=%s failed: %s", new_id, exc)

    return to_json_response(Persisted(new_id))
