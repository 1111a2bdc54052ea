"""Admin session lookup against a better-auth compatible provider.

The admin gate never sees exceptions from the provider: ``SessionGateway``
turns every lookup into either ``Authenticated`` or ``Unauthenticated`` and
logs failures. Errors are treated as "no session" (fail closed).
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx
from loguru import logger

from kcic_site.config import AUTH_FORWARDED_HEADERS, AUTH_SESSION_URL, AUTH_TIMEOUT

Session = dict[str, Any]
SessionLookup = Callable[[Mapping[str, str]], Awaitable[Session | None]]


@dataclass(frozen=True)
class Authenticated:
    session: Session


@dataclass(frozen=True)
class Unauthenticated:
    reason: str


AuthResult = Authenticated | Unauthenticated


class SessionGateway:
    """Adapter that maps a raw session lookup onto ``AuthResult``."""

    def __init__(self, lookup: SessionLookup) -> None:
        self.lookup = lookup

    async def check(self, headers: Mapping[str, str]) -> AuthResult:
        try:
            session = await self.lookup(headers)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Session lookup failed: {!r}", exc)
            return Unauthenticated(reason=f"lookup error: {type(exc).__name__}")
        if not session:
            return Unauthenticated(reason="no session")
        return Authenticated(session=session)


class BetterAuthSessionClient:
    """Fetches the current session from the auth provider's get-session endpoint.

    Only the credential-bearing request headers are forwarded. Returns the
    session JSON, or None when the provider answers with an empty/null body.
    Raises ``httpx.HTTPError`` on transport errors and non-2xx statuses.
    """

    def __init__(
        self,
        url: str = AUTH_SESSION_URL,
        timeout: float = AUTH_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def __call__(self, headers: Mapping[str, str]) -> Session | None:
        forwarded = {
            name: headers[name] for name in AUTH_FORWARDED_HEADERS if headers.get(name)
        }
        if not forwarded:
            return None

        resp = await self._client.get(self.url, headers=forwarded)
        resp.raise_for_status()
        if not resp.content.strip():
            return None
        data = resp.json()
        if not isinstance(data, dict) or not data:
            return None
        return data

    async def aclose(self) -> None:
        await self._client.aclose()
