"""Configuration management for Quizlet Downloader."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .core.options import DEFAULT_OPTIONS_PATH
from .scrape.config import ScrapeConfig

# Load .env file
load_dotenv()


class ExportConfig(BaseModel):
    """Configuration for writing output files."""

    output_dir: str = Field(default=".", description="Default directory offered in the save prompt")
    options_path: str = Field(default=str(DEFAULT_OPTIONS_PATH), description="Where user options are stored")
    image_timeout: int = Field(default=15, description="Per-image download timeout (seconds)")
    image_width: float = Field(default=2.0, description="Embedded image width in the document (inches)")

    @property
    def output_path(self) -> Path:
        return Path(os.path.expanduser(self.output_dir))


class AppConfig(BaseModel):
    """Main application configuration."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Component Configurations
    scrape: ScrapeConfig = Field(default_factory=ScrapeConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    # Application Settings
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="WARNING", description="Logging level")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Load configuration from environment variables.

        Environment variable mapping:
        - QDL_STRATEGY: auto, file, http or browser
        - QDL_OUTPUT_DIR: default save directory
        - QDL_OPTIONS_PATH: options file location
        - QDL_DEBUG: true or false
        - QDL_LOG_LEVEL: logging level name
        """
        export = ExportConfig(
            output_dir=os.getenv("QDL_OUTPUT_DIR", "."),
            options_path=os.getenv("QDL_OPTIONS_PATH", str(DEFAULT_OPTIONS_PATH)),
            image_timeout=int(os.getenv("QDL_IMAGE_TIMEOUT", "15") or "15"),
            image_width=float(os.getenv("QDL_IMAGE_WIDTH", "2.0") or "2.0"),
        )

        debug = os.getenv("QDL_DEBUG", "false").lower() == "true"
        return cls(
            scrape=ScrapeConfig.from_env(),
            export=export,
            debug=debug,
            log_level="DEBUG" if debug else os.getenv("QDL_LOG_LEVEL", "WARNING").upper(),
        )
