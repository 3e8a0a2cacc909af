"""HTTP client for the YouTube Music search endpoint.

Builds the POST the web client sends: query string ``{alt, key, ...extra}``
and a JSON body holding the fixed ``WEB_REMIX`` client context merged with a
query payload (``{"query": ...}`` for a fresh search, a shelf's search
endpoint for "show all", or ``{}`` for a continuation).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from tracksource.config.settings import Settings
from tracksource.interfaces.credential_provider import ICredentialProvider
from tracksource.providers.transport import transport_error
from tracksource.utils.errors import TransportError, ValidationError
from tracksource.utils.logging import get_logger

_PROVIDER_NAME = "yt_music"
_REFERER = "https://music.youtube.com/search"


class YouTubeMusicClient:
    """Sends search requests; knows nothing about the response layout."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        credentials: ICredentialProvider,
        settings: Settings,
    ) -> None:
        self._http = http_client
        self._credentials = credentials
        self._settings = settings
        self._logger = get_logger(__name__)

    def _client_context(self) -> dict[str, Any]:
        return {
            "client": {
                "clientName": self._settings.ytmusic_client_name,
                "clientVersion": self._settings.ytmusic_client_version,
                "hl": self._settings.ytmusic_hl,
                "gl": self._settings.ytmusic_gl,
            },
        }

    async def search(
        self,
        payload: Mapping[str, Any],
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """POST a search and return the decoded JSON response.

        Raises
        ------
        ValidationError
            If *payload* is not a mapping, or *params* is given and is not one.
        TransportError
            If the request fails or the body is not JSON.
        """
        if not isinstance(payload, Mapping):
            raise ValidationError("<payload> must be a mapping", provider_name=_PROVIDER_NAME)
        if params is not None and not isinstance(params, Mapping):
            raise ValidationError(
                "<params>, if defined, must be a mapping", provider_name=_PROVIDER_NAME
            )

        query_params = {"alt": "json", "key": await self._credentials.get(), **(params or {})}
        body = {"context": self._client_context(), **payload}

        try:
            response = await self._http.post(
                self._settings.ytmusic_search_url,
                params=query_params,
                json=body,
                headers={"referer": _REFERER},
                timeout=self._settings.ytmusic_request_timeout,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            raise transport_error(exc, _PROVIDER_NAME) from exc
        except ValueError as exc:
            raise TransportError(
                message=f"Search response is not valid JSON: {exc}",
                status="invalid_json",
                body=response.text,
                provider_name=_PROVIDER_NAME,
            ) from exc

        self._logger.debug(
            "ytmusic_search_request",
            payload_keys=sorted(payload),
            continuation="continuation" in (params or {}),
        )
        return data
