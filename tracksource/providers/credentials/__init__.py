"""Credential provider implementations."""

from tracksource.providers.credentials.innertube_key_provider import InnertubeKeyProvider

__all__ = ["InnertubeKeyProvider"]
