"""Interface AuthHeaderProvider - supplies the bearer token header."""

from abc import ABC, abstractmethod


class AuthHeaderProvider(ABC):
    """Token acquisition and storage live elsewhere; this only produces headers."""

    @abstractmethod
    async def get_auth_headers(self) -> dict[str, str]:
        raise NotImplementedError


class StaticTokenAuth(AuthHeaderProvider):
    def __init__(self, token: str | None) -> None:
        self._token = token

    async def get_auth_headers(self) -> dict[str, str]:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}
