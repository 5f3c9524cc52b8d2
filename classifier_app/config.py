"""Client app configuration."""

from dataclasses import dataclass
from typing import Optional
import os


DEFAULT_API_BASE_URL = "http://localhost:5000"


@dataclass
class AppConfig:
    """Configuration for the classifier client."""

    # API settings
    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout_sec: int = 30

    # UI settings
    page_title: str = "Image Classifier"
    page_icon: str = ":frame_with_picture:"
    layout: str = "centered"

    # Gallery settings
    images_per_row: int = 4

    # Upload settings
    max_upload_mb: int = 10

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        return cls(
            api_base_url=os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL),
            api_timeout_sec=int(os.getenv("API_TIMEOUT_SEC", "30")),
            page_title=os.getenv("PAGE_TITLE", "Image Classifier"),
            images_per_row=int(os.getenv("IMAGES_PER_ROW", "4")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
        )


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def set_config(config: AppConfig) -> None:
    """Set the global config instance."""
    global _config
    _config = config
