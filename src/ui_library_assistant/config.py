"""Application configuration using Pydantic settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Input
    max_query_length: int = Field(
        200, alias="MAX_QUERY_LENGTH",
        description="Max characters accepted from the chat input. Longer queries are rejected by the assistant.",
    )

    # Mock streaming
    stream_initial_delay: float = Field(
        1.5, alias="STREAM_INITIAL_DELAY",
        description="Seconds to wait before the first chunk, simulating backend latency.",
    )
    stream_chunk_delay: float = Field(
        0.35, alias="STREAM_CHUNK_DELAY",
        description="Seconds between successive streamed chunks.",
    )

    # Conversation history
    history_path: str = Field(
        "", alias="HISTORY_PATH",
        description="Path to the JSON file holding the chat transcript. Empty = in-memory only.",
    )

    # Logging
    log_level: str = Field(
        "INFO", alias="LOG_LEVEL",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, or CRITICAL.",
    )
    log_file: str = Field(
        "", alias="LOG_FILE",
        description="Path to log file for file-based logging with rotation. Empty = console only.",
    )
    log_file_max_bytes: int = Field(
        10_485_760, alias="LOG_FILE_MAX_BYTES",
        description="Max size in bytes per log file before rotation. Default: 10 MB.",
    )
    log_file_backup_count: int = Field(
        5, alias="LOG_FILE_BACKUP_COUNT",
        description="Number of rotated backup log files to keep.",
    )
    log_format: str = Field(
        "auto", alias="LOG_FORMAT",
        description="Log renderer: auto (JSON when LOG_FILE is set, console otherwise), json, or console.",
    )


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
