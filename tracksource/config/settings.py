"""Library settings loaded from environment variables via pydantic-settings.

Sources, in priority order:

  1. Environment variables, e.g. ``YTMUSIC_REQUEST_TIMEOUT=15``
  2. ``.env`` file in the working directory
  3. The defaults below

Field ``ytmusic_request_timeout`` maps to env var ``YTMUSIC_REQUEST_TIMEOUT``
(pydantic-settings matches case-insensitively).  ``load_settings`` in
``tracksource.config.loader`` adds an optional YAML layer underneath.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/80.0.3987.132 Safari/537.36"
)


class Settings(BaseSettings):
    """tracksource settings.

    Environment variables override defaults. Loaded from .env when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === YouTube Music (shelf search backend) ===
    ytmusic_home_url: str = "https://music.youtube.com/"
    ytmusic_search_url: str = "https://music.youtube.com/youtubei/v1/search"
    ytmusic_client_name: str = "WEB_REMIX"
    ytmusic_client_version: str = "0.1"
    ytmusic_hl: str = "en"
    ytmusic_gl: str = "US"
    ytmusic_request_timeout: float = Field(default=10.0, gt=0)
    user_agent: str = _DESKTOP_USER_AGENT
    # How long the scraped API key is reused before it is fetched again.
    credential_ttl: int = Field(default=86400, gt=0)

    # === YouTube (multi-query search backend) ===
    youtube_query_concurrency: int = Field(default=3, ge=1)
    youtube_results_per_query: int = Field(default=5, ge=1)
    youtube_page_start: int = Field(default=1, ge=1)
    youtube_page_end: int = Field(default=2, ge=1)
    youtube_results_per_page: int = Field(default=20, ge=1)

    # === Feed resolution (yt-dlp) ===
    feed_socket_timeout: int = Field(default=20, gt=0)
    feed_retries: int = Field(default=20, ge=0)
    feed_cache_enabled: bool = False

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"
