"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all.  Tests and embedding
applications can build their own ``Settings`` instance and hand it to
``create_app``.
"""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Company API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Log file written next to the console output.  Set LOG_FILE to an empty
    # string to log to the console only.  LOG_FORMAT is "json" or "text".
    log_file: str = os.getenv("LOG_FILE", "company-api.log")
    log_format: str = os.getenv("LOG_FORMAT", "json")

    # Location of the JSON file holding all company records.  A relative
    # path is resolved against the ``company_api`` package directory by
    # ``get_data_path``.
    data_file: str = os.getenv("DATA_FILE", os.path.join("data", "data.json"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3004"))

    def get_data_path(self) -> str:
        """Return the absolute path of the company data file."""
        if os.path.isabs(self.data_file):
            return self.data_file
        base_dir = Path(__file__).resolve().parent.parent.parent  # company_api/
        return str((base_dir / self.data_file).resolve())


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
