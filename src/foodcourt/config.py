"""Configuration loading and validation."""

import os
from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

load_dotenv(override=True)


class FirebaseConfig(BaseModel):
    """Firebase configuration for a specific environment."""

    credentials_path: Path
    database_url: str
    api_key: str = ""
    auth_timeout: float = 10.0

    @field_validator("credentials_path", mode="before")
    @classmethod
    def expand_path(cls, v: str) -> Path:
        """Expand environment variables and ~ in path."""
        expanded = os.path.expandvars(os.path.expanduser(str(v)))
        return Path(expanded)

    @field_validator("database_url", "api_key", mode="before")
    @classmethod
    def expand_vars(cls, v: str) -> str:
        return os.path.expandvars(str(v)) if v is not None else ""


Env = Literal["prod", "dev"]


def load_firebase_config(config_path: Path, env: Env = "dev") -> FirebaseConfig:
    """Load Firebase config for the specified environment."""
    with open(config_path) as f:
        data = yaml.safe_load(f)

    if env not in data:
        raise ValueError(f"Environment '{env}' not found in config. Available: {list(data.keys())}")

    return FirebaseConfig(**data[env])
