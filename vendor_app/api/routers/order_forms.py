"""
Order-creation screen.

Each session holds one OrderComposer. Edits return the new snapshot;
workflow failures (validation, backend errors) are part of the snapshot
state rather than HTTP errors, so the client can show and dismiss them.
"""

from fastapi import APIRouter, Depends, status

from vendor_app.api.dependencies import get_composer_factory, get_form_sessions
from vendor_app.api.schemas.order_forms import (
    ConfirmOrderRequest,
    MoveLocationRequest,
    OrderFormSessionResponse,
    SetLocationRequest,
    UpdateOrderFormRequest,
)
from vendor_app.domain.errors import ValidationError
from vendor_app.domain.value_objects.distribution import DistributionTarget
from vendor_app.infrastructure.in_memory.order_form_session_repo import (
    InMemoryOrderFormSessionRepo,
)

router = APIRouter()


def _snapshot(sessions: InMemoryOrderFormSessionRepo, session_id: str) -> OrderFormSessionResponse:
    return OrderFormSessionResponse.from_composer(session_id, sessions.get(session_id))


@router.post(
    "/order-forms",
    response_model=OrderFormSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def open_order_form(
    new_composer=Depends(get_composer_factory),
    sessions: InMemoryOrderFormSessionRepo = Depends(get_form_sessions),
) -> OrderFormSessionResponse:
    composer = new_composer()
    await composer.load_packages()
    session_id = sessions.add(composer)
    return OrderFormSessionResponse.from_composer(session_id, composer)


@router.get("/order-forms/{session_id}", response_model=OrderFormSessionResponse)
async def get_order_form(
    session_id: str,
    sessions: InMemoryOrderFormSessionRepo = Depends(get_form_sessions),
) -> OrderFormSessionResponse:
    return _snapshot(sessions, session_id)


@router.patch("/order-forms/{session_id}", response_model=OrderFormSessionResponse)
async def update_order_form(
    session_id: str,
    payload: UpdateOrderFormRequest,
    sessions: InMemoryOrderFormSessionRepo = Depends(get_form_sessions),
) -> OrderFormSessionResponse:
    composer = sessions.get(session_id)
    composer.update_form(**payload.model_dump(exclude_unset=True))
    return OrderFormSessionResponse.from_composer(session_id, composer)


@router.delete("/order-forms/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_order_form(
    session_id: str,
    sessions: InMemoryOrderFormSessionRepo = Depends(get_form_sessions),
) -> None:
    sessions.discard(session_id)


@router.post("/order-forms/{session_id}/locations", response_model=OrderFormSessionResponse)
async def add_stop(
    session_id: str,
    sessions: InMemoryOrderFormSessionRepo = Depends(get_form_sessions),
) -> OrderFormSessionResponse:
    sessions.get(session_id).add_stop()
    return _snapshot(sessions, session_id)


@router.post("/order-forms/{session_id}/locations/move", response_model=OrderFormSessionResponse)
async def move_stop(
    session_id: str,
    payload: MoveLocationRequest,
    sessions: InMemoryOrderFormSessionRepo = Depends(get_form_sessions),
) -> OrderFormSessionResponse:
    sessions.get(session_id).move_stop(payload.from_index, payload.to_index)
    return _snapshot(sessions, session_id)


@router.put("/order-forms/{session_id}/locations/{position}", response_model=OrderFormSessionResponse)
async def set_location(
    session_id: str,
    position: int,
    payload: SetLocationRequest,
    sessions: InMemoryOrderFormSessionRepo = Depends(get_form_sessions),
) -> OrderFormSessionResponse:
    sessions.get(session_id).set_location(position, payload.value)
    return _snapshot(sessions, session_id)


@router.delete("/order-forms/{session_id}/locations/{position}", response_model=OrderFormSessionResponse)
async def remove_stop(
    session_id: str,
    position: int,
    sessions: InMemoryOrderFormSessionRepo = Depends(get_form_sessions),
) -> OrderFormSessionResponse:
    sessions.get(session_id).remove_stop(position)
    return _snapshot(sessions, session_id)


@router.post("/order-forms/{session_id}/quote", response_model=OrderFormSessionResponse)
async def request_quote(
    session_id: str,
    sessions: InMemoryOrderFormSessionRepo = Depends(get_form_sessions),
) -> OrderFormSessionResponse:
    await sessions.get(session_id).request_quote()
    return _snapshot(sessions, session_id)


@router.post("/order-forms/{session_id}/confirm", response_model=OrderFormSessionResponse)
async def confirm_order(
    session_id: str,
    payload: ConfirmOrderRequest | None = None,
    sessions: InMemoryOrderFormSessionRepo = Depends(get_form_sessions),
) -> OrderFormSessionResponse:
    composer = sessions.get(session_id)
    payload = payload or ConfirmOrderRequest()
    try:
        target = DistributionTarget(send_to=payload.send_to, near_city=tuple(payload.near_city))
    except ValueError:
        raise ValidationError("near_city", "Please select at least one city")
    await composer.confirm(target)
    return _snapshot(sessions, session_id)


@router.post("/order-forms/{session_id}/dismiss-error", response_model=OrderFormSessionResponse)
async def dismiss_error(
    session_id: str,
    sessions: InMemoryOrderFormSessionRepo = Depends(get_form_sessions),
) -> OrderFormSessionResponse:
    sessions.get(session_id).dismiss_error()
    return _snapshot(sessions, session_id)
