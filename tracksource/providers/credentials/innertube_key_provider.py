"""YouTube Music API key provider.

The search endpoint is keyed by the ``INNERTUBE_API_KEY`` embedded in the
music.youtube.com landing page.  The key is scraped once, kept in an
:class:`ICacheProvider` and re-scraped when the entry expires or the caller
forces a refresh.
"""

from __future__ import annotations

import asyncio
import re

import httpx

from tracksource.config.settings import Settings
from tracksource.interfaces.cache_provider import ICacheProvider
from tracksource.interfaces.credential_provider import ICredentialProvider
from tracksource.providers.cache.memory_cache import MemoryCacheProvider
from tracksource.providers.transport import transport_error
from tracksource.utils.errors import CredentialExtractionError
from tracksource.utils.logging import get_logger

_API_KEY_PATTERN = re.compile(r'"INNERTUBE_API_KEY":"(.+?)"')
_CACHE_KEY = "innertube_api_key"
_PROVIDER_NAME = "yt_music"


class InnertubeKeyProvider(ICredentialProvider):
    """Scrapes and memoizes the YouTube Music API key.

    The ``httpx.AsyncClient`` is injected for testability; a lock keeps
    concurrent first calls from scraping the page more than once.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Settings,
        cache: ICacheProvider | None = None,
    ) -> None:
        self._http = http_client
        self._settings = settings
        self._cache = cache or MemoryCacheProvider(max_size=1, ttl=settings.credential_ttl)
        self._lock = asyncio.Lock()
        self._logger = get_logger(__name__)

    async def get(self, force_refresh: bool = False) -> str:
        if not force_refresh:
            cached = await self._cache.get(_CACHE_KEY)
            if cached:
                return cached

        async with self._lock:
            # Another caller may have refreshed while we waited.
            if not force_refresh:
                cached = await self._cache.get(_CACHE_KEY)
                if cached:
                    return cached
            else:
                await self._cache.delete(_CACHE_KEY)

            body = await self._fetch_home_page()
            match = _API_KEY_PATTERN.search(body or "")
            if match is None:
                raise CredentialExtractionError(provider_name=_PROVIDER_NAME)

            key = match.group(1)
            await self._cache.set(_CACHE_KEY, key)
            self._logger.info("innertube_key_refreshed", forced=force_refresh)
            return key

    async def _fetch_home_page(self) -> str:
        try:
            response = await self._http.get(
                self._settings.ytmusic_home_url,
                timeout=self._settings.ytmusic_request_timeout,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise transport_error(exc, _PROVIDER_NAME) from exc
        return response.text
