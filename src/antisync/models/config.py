"""Configuration models for antisync."""

from pydantic import BaseModel, Field, HttpUrl
from pathlib import Path
import yaml
import os
import stat


SAMPLE_CONFIG = (
    "targets:\n"
    "  - name: dev\n"
    "    url: http://localhost:8080\n"
    "    api_key: YOUR_API_KEY_HERE\n"
    "  - name: prod\n"
    "    url: https://blog.example.com\n"
    "    api_key: YOUR_API_KEY_HERE\n"
)


class TargetConfig(BaseModel):
    """Connection settings for one deployment target."""

    name: str = Field(
        ...,
        min_length=1,
        description="Target name used in '~ public <name>' directives (e.g., 'dev', 'prod')"
    )

    url: HttpUrl = Field(
        ...,
        description="Base URL of the antiblog instance"
    )

    api_key: str = Field(
        ...,
        description="API key for authentication"
    )

    @property
    def base_url(self) -> str:
        """Base URL without trailing slash, ready for appending endpoints."""
        return str(self.url).rstrip("/")

    model_config = {"frozen": True}


class Config(BaseModel):
    """Root configuration for antisync."""

    targets: list[TargetConfig] = Field(
        default_factory=list,
        description="Known deployment targets"
    )

    def get_target(self, name: str) -> TargetConfig:
        """
        Look up a target by name.

        Raises:
            ValueError: If no target has that name
        """
        for target in self.targets:
            if target.name == name:
                return target
        raise ValueError(f"Configuration for {name} not found")

    @classmethod
    def from_data(cls, data) -> "Config":
        """
        Build config from parsed YAML.

        A bare list of targets (the legacy JSON config format) is accepted
        as well as a mapping with a ``targets`` key.
        """
        if data is None:
            data = {}
        if isinstance(data, list):
            data = {"targets": data}
        return cls(**data)

    @classmethod
    def load(cls, path: Path) -> "Config":
        """
        Load configuration from YAML file.

        Validates file permissions before loading.
        Raises PermissionError if file is group/world readable.

        Args:
            path: Path to config file

        Returns:
            Validated Config instance

        Raises:
            PermissionError: If file permissions are too open
            FileNotFoundError: If config file doesn't exist
            ValueError: If YAML is invalid or validation fails
        """
        if not path.exists():
            raise FileNotFoundError(
                f"Configuration file not found at {path}\n\n"
                f"Please create the file with the following format:\n\n"
                f"{SAMPLE_CONFIG}"
            )

        # API keys live here, so the file must not be readable by others
        mode = os.stat(path).st_mode
        if mode & (stat.S_IRWXG | stat.S_IRWXO):
            raise PermissionError(
                f"Config file has overly permissive permissions: {oct(mode)}\n"
                f"Run: chmod 600 {path}"
            )

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_data(data)

    model_config = {"frozen": True}
