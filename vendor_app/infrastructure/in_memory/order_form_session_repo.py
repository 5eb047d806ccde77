"""In-memory store of open order-creation sessions."""

from uuid import uuid4

from vendor_app.application.use_cases.compose_order import OrderComposer
from vendor_app.domain.errors import FormSessionNotFoundError


class InMemoryOrderFormSessionRepo:
    """Keeps each session's composer for the lifetime of the process."""

    def __init__(self) -> None:
        self._sessions: dict[str, OrderComposer] = {}

    def add(self, composer: OrderComposer) -> str:
        session_id = uuid4().hex
        self._sessions[session_id] = composer
        return session_id

    def get(self, session_id: str) -> OrderComposer:
        composer = self._sessions.get(session_id)
        if composer is None:
            raise FormSessionNotFoundError(session_id)
        return composer

    def discard(self, session_id: str) -> None:
        """Drop a session when the screen is left."""
        if session_id not in self._sessions:
            raise FormSessionNotFoundError(session_id)
        del self._sessions[session_id]
