import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings"""

    def __init__(self):
        self.debug: bool = os.getenv("DEBUG", "false").lower() == "true"
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_file: Optional[str] = os.getenv("LOG_FILE") or None

        self.oembed_enabled: bool = os.getenv("OEMBED_ENABLED", "true").lower() == "true"
        self.oembed_timeout: float = float(os.getenv("OEMBED_TIMEOUT", "10"))

    def as_dict(self) -> dict:
        return {
            'Debug Mode': self.debug,
            'Log Level': self.log_level,
            'Log File': self.log_file or 'console only',
            'oEmbed Enrichment': 'Enabled' if self.oembed_enabled else 'Disabled',
            'oEmbed Timeout': f"{self.oembed_timeout:g}s",
        }


settings = Settings()
