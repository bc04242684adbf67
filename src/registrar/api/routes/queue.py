"""Registration queue endpoints."""

from fastapi import APIRouter, status

from registrar.api.dependencies import EngineDep
from registrar.api.models import (
    APIResponse,
    ProcessQueueResponse,
    QueuedResponse,
    RegistrationCreate,
    RegistrationRequestResponse,
    processed_to_response,
)

router = APIRouter(prefix="/queue", tags=["queue"])


@router.get("", response_model=APIResponse[list[RegistrationRequestResponse]])
def list_pending(engine: EngineDep) -> APIResponse[list[RegistrationRequestResponse]]:
    """List pending requests, oldest first."""
    pending = engine.pending_requests()
    return APIResponse(data=[RegistrationRequestResponse.model_validate(r) for r in pending])


@router.post(
    "",
    response_model=APIResponse[QueuedResponse],
    status_code=status.HTTP_202_ACCEPTED,
)
def submit_request(
    registration: RegistrationCreate, engine: EngineDep
) -> APIResponse[QueuedResponse]:
    """Queue a registration request. It takes effect when the queue is processed."""
    queued = engine.queue_registration(registration.student_id, registration.course_code)
    return APIResponse(
        data=QueuedResponse(
            request=RegistrationRequestResponse.model_validate(queued.request),
            position=queued.position,
        )
    )


@router.post("/process", response_model=APIResponse[ProcessQueueResponse])
def process_queue(engine: EngineDep) -> APIResponse[ProcessQueueResponse]:
    """Process every pending request in order."""
    results = engine.process_queue()
    accepted = sum(1 for r in results if r.accepted)
    return APIResponse(
        data=ProcessQueueResponse(
            results=[processed_to_response(r) for r in results],
            accepted=accepted,
            rejected=len(results) - accepted,
        )
    )
