from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

# Conventional artwork names, in probe order.
COMMON_ARTWORK_FILES = (
    "cover.jpg",
    "cover.jpeg",
    "cover.png",
    "folder.jpg",
    "folder.jpeg",
    "folder.png",
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    artwork_encoders: list[str] = ["ffmpeg", "avconv"]
    artwork_candidates: list[str] = list(COMMON_ARTWORK_FILES)
    artwork_audio_extensions: list[str] = [".mp3"]
    artwork_job_count: PositiveInt | None = None
    artwork_id3v2_version: int = 3
    artwork_cover_title: str = "Album cover"
    artwork_cover_comment: str = "Cover (Front)"

    incidents_url_template: str = (
        "http://www.umpd.umd.edu/stats/incident_logs.cfm?year={year}&month={month}"
    )
    incidents_min_year: int = 2011
    incidents_timeout_seconds: int = 30
    incidents_user_agent: str = "toolshed-incident-logs/0.1"
    incidents_strict_pairing: bool = False
