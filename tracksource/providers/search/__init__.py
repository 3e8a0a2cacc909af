"""Video search provider implementations."""

from tracksource.providers.search.ytdlp_search_provider import YtDlpSearchProvider

__all__ = ["YtDlpSearchProvider"]
