"""Async HTTP client for the KeyShorty API."""

from __future__ import annotations

import httpx

from keyshorty.config import settings
from keyshorty.models.application import Application
from keyshorty.models.shortcut import Shortcut


class APIError(Exception):
    """A call to the API did not succeed.

    ``status_code`` is 0 when the server could not be reached at all.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{status_code}] {message}" if status_code else message)


class KeyShortyClient:
    """One coroutine per API endpoint, returning typed models."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self._http = httpx.AsyncClient(base_url=self.base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> KeyShortyClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, body: dict | None = None, parse=None):
        """Send one request and decode its JSON body, optionally through ``parse``.

        Undecodable or unexpected 2xx bodies are reported as APIError too, so
        callers only ever handle one exception type.
        """
        try:
            r = await self._http.request(method, path, json=body)
        except httpx.HTTPError as exc:
            raise APIError(0, str(exc) or exc.__class__.__name__) from exc
        if not r.is_success:
            raise APIError(r.status_code, _error_text(r))
        try:
            data = r.json()
            return parse(data) if parse else data
        except ValueError as exc:  # covers JSONDecodeError and pydantic ValidationError
            raise APIError(r.status_code, "Invalid response from server") from exc

    async def list_applications(self) -> list[Application]:
        return await self._request("GET", "/applications", parse=_applications)

    async def create_application(self, name: str) -> Application:
        return await self._request("POST", "/applications", {"name": name}, parse=Application.model_validate)

    async def delete_application(self, application_id: int) -> None:
        await self._request("DELETE", f"/applications/{application_id}")

    async def list_shortcuts(self, application_id: int) -> list[Shortcut]:
        return await self._request("GET", f"/applications/{application_id}/shortcuts", parse=_shortcuts)

    async def create_shortcut(
        self,
        application_id: int,
        key_combination: str,
        description: str,
    ) -> Shortcut:
        return await self._request(
            "POST",
            "/shortcuts",
            {
                "application_id": application_id,
                "key_combination": key_combination,
                "description": description,
            },
            parse=Shortcut.model_validate,
        )

    async def delete_shortcut(self, shortcut_id: int) -> None:
        await self._request("DELETE", f"/shortcuts/{shortcut_id}")


def _applications(data) -> list[Application]:
    if not isinstance(data, list):
        raise ValueError("expected a list of applications")
    return [Application.model_validate(item) for item in data]


def _shortcuts(data) -> list[Shortcut]:
    if not isinstance(data, list):
        raise ValueError("expected a list of shortcuts")
    return [Shortcut.model_validate(item) for item in data]


def _error_text(r: httpx.Response) -> str:
    """Pull the ``error`` field out of a failed response, falling back to the raw body."""
    try:
        payload = r.json()
    except ValueError:
        return r.text or r.reason_phrase
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return r.text or r.reason_phrase
