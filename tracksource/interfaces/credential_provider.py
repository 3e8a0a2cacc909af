"""Abstract base class for backend credential providers.

The YouTube Music search endpoint needs an API key that is scraped from the
site's landing page.  Providers memoize it and refresh it on demand; the
caller owns the provider instance, so there is no hidden global state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ICredentialProvider(ABC):
    """Contract for obtaining an API credential."""

    @abstractmethod
    async def get(self, force_refresh: bool = False) -> str:
        """Return the credential, fetching it if needed.

        Parameters
        ----------
        force_refresh:
            Ignore any memoized value and fetch a fresh one.

        Raises
        ------
        tracksource.utils.errors.CredentialExtractionError
            If the credential marker is absent from the fetched page.
        tracksource.utils.errors.TransportError
            If the page could not be fetched.
        """
