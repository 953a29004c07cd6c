"""
Configuration Module - Viewer settings from the environment

Values come from environment variables, optionally seeded from a .env file.
"""
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_LOG_DIRECTORY = Path(__file__).parent / "app_log"


class ViewerSettings(BaseModel):
    request_timeout: float = Field(default=30.0, gt=0)
    log_directory: Path = DEFAULT_LOG_DIRECTORY
    log_level: str = "INFO"
    user_agent: str = "cilv-log-viewer"


# ViewerSettings field -> environment variable
ENV_VARIABLES = {
    "request_timeout": "CILV_REQUEST_TIMEOUT",
    "log_directory": "CILV_LOG_DIR",
    "log_level": "CILV_LOG_LEVEL",
    "user_agent": "CILV_USER_AGENT",
}


def load_settings() -> ViewerSettings:
    """
    Build settings from the environment

    Unset variables keep their defaults.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    values = {}
    for field_name, variable in ENV_VARIABLES.items():
        value = os.getenv(variable)
        if value:
            values[field_name] = value
    return ViewerSettings(**values)
