"""Shared httpx error translation for the HTTP-backed providers."""

from __future__ import annotations

import httpx

from tracksource.utils.errors import TransportError


def transport_error(exc: httpx.HTTPError, provider_name: str) -> TransportError:
    """Translate an httpx failure into a :class:`TransportError`.

    Status errors keep the response's status code and body; everything else
    (timeouts, connection resets, ...) records the exception class as the
    protocol-level status.
    """
    if isinstance(exc, httpx.HTTPStatusError):
        return TransportError(
            message=str(exc),
            status_code=exc.response.status_code,
            body=exc.response.text,
            provider_name=provider_name,
        )
    return TransportError(
        message=str(exc) or type(exc).__name__,
        status=type(exc).__name__,
        provider_name=provider_name,
    )
