"""Contact routes for portfolio contact form submissions."""

import logging
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, status

from src.shared.contact.schemas import (
    ContactResponse,
    ContactValidationError,
    SubmissionListResponse,
    validate_contact,
)
from src.shared.contact.service import ContactService, get_contact_service

router = APIRouter(prefix="/api/contact", tags=["contact"])

SUCCESS_MESSAGE = "Message received successfully. We'll get back to you soon!"
RATE_LIMITED_MESSAGE = "Too many submissions. Please try again in a minute."
INTERNAL_ERROR_MESSAGE = "Internal server error. Please try again later."


def get_client_ip(request: Request) -> str:
    """Get client IP address for rate limiting."""
    # Check for forwarded IP (from proxy/load balancer)
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # Take the first IP in the chain
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    real_ip = request.headers.get("X-Real-IP")
    if real_ip and real_ip.strip():
        return real_ip.strip()
    # Fallback to direct connection
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


async def _read_json_body(request: Request):
    """Decode the JSON body; anything undecodable is treated as missing."""
    try:
        return await request.json()
    except ValueError:
        return None


def _internal_error(service: ContactService, exc: Exception) -> HTTPException:
    logging.error(f"Contact form error: {str(exc)}", exc_info=True)
    detail = {"message": INTERNAL_ERROR_MESSAGE}
    if service.settings.is_development:
        detail["error"] = str(exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.post("", response_model=ContactResponse, status_code=status.HTTP_200_OK)
async def submit_contact_form(
    request: Request,
    background_tasks: BackgroundTasks,
    service: ContactService = Depends(get_contact_service),
):
    """
    Accept a contact form message.

    - Max 3 submissions per minute per client (fixed window, in memory)
    - First failing field is reported as a 400
    - Email delivery is best-effort and runs after the response is sent
    """
    try:
        client_ip = get_client_ip(request)

        decision = service.rate_limiter.check_and_consume(client_ip)
        if not decision.allowed:
            logging.warning(f"Contact form rate limit exceeded for {client_ip}")
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=RATE_LIMITED_MESSAGE,
            )

        try:
            contact_data = validate_contact(await _read_json_body(request))
        except ContactValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        submission = service.submission_log.append(contact_data, client_ip)
        logging.info(f"Contact submission {submission.id} accepted from {client_ip}")

        background_tasks.add_task(service.deliver, contact_data, submission.id)

        return ContactResponse(
            message=SUCCESS_MESSAGE,
            submission_id=submission.id,
            remaining_submissions=decision.remaining,
        )
    except HTTPException:
        raise
    except Exception as e:
        raise _internal_error(service, e)


@router.get("/submissions", response_model=SubmissionListResponse)
async def list_submissions(service: ContactService = Depends(get_contact_service)):
    """
    List accepted submissions without their message bodies.

    Unauthenticated; acceptable only for a low-stakes personal site.
    """
    summaries = service.submission_log.summaries()
    return SubmissionListResponse(total=len(summaries), submissions=summaries)
