"""
Configuration management for the Scavenger Hunt tracker.
"""
import json
from pathlib import Path
from typing import Any, List, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator


DEFAULT_STATE_KEY = "ScavengerHunt.Items.v1"
DEFAULT_SUBMISSION_URL = "https://httpbin.org/post"


class DirectoryConfig(BaseModel):
    """Directory configuration settings."""
    config: str = Field(default=".config/scavenger-hunt", description="Configuration directory")
    store: str = Field(default="store", description="Directory for persisted key-value data")


class StorageConfig(BaseModel):
    """Persistence configuration."""
    state_key: str = Field(DEFAULT_STATE_KEY, min_length=1, description="Key the item list is stored under")


class SubmissionConfig(BaseModel):
    """Remote submission configuration."""
    url: str = Field(DEFAULT_SUBMISSION_URL, description="Endpoint completed hunts are posted to")
    timeout_seconds: float = Field(5.0, gt=0, description="HTTP client timeout")
    treat_error_status_as_failure: bool = Field(
        False, description="Report non-2xx responses as failed submissions"
    )

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        """Only plain HTTP(S) endpoints are supported."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Submission URL must be http(s): {v}")
        return v


class PhotoConfig(BaseModel):
    """Photo encoding configuration."""
    jpeg_quality: int = Field(70, ge=1, le=95, description="JPEG quality for stored photos")


class Config(BaseModel):
    """Main configuration class."""
    directories: DirectoryConfig = Field(default_factory=DirectoryConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    submission: SubmissionConfig = Field(default_factory=SubmissionConfig)
    photos: PhotoConfig = Field(default_factory=PhotoConfig)

    def get_data_dir(self) -> Path:
        """Get the main data directory path."""
        config_dir = Path(self.directories.config)
        if config_dir.is_absolute():
            return config_dir
        return Path.home() / config_dir

    def get_store_dir(self) -> Path:
        """Get the key-value store directory path."""
        return self.get_data_dir() / self.directories.store

    def get_config_file(self) -> Path:
        """Get the config file path."""
        return self.get_data_dir() / "config.json"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for directory in (self.get_data_dir(), self.get_store_dir()):
            directory.mkdir(parents=True, exist_ok=True)


class ConfigManager:
    """Manages loading, saving, and updating configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        self._config: Optional[Config] = None
        self._config_file = config_file

    @property
    def config(self) -> Config:
        """Get the current configuration, loading if needed."""
        if self._config is None:
            self._config = self.load()
        return self._config

    @property
    def config_file(self) -> Path:
        if self._config_file is not None:
            return self._config_file
        return Config().get_config_file()

    def load(self) -> Config:
        """Load configuration from file or create default."""
        config = Config()
        config_file = self.config_file

        if config_file.exists():
            try:
                with open(config_file, 'r') as f:
                    data = json.load(f)
                config = Config(**data)
                print(f"Loaded configuration from {config_file}")
            except (OSError, ValueError, TypeError, ValidationError) as e:
                print(f"Error loading config from {config_file}: {e}")
                print("Using default configuration")
        else:
            print("No configuration file found, using defaults")

        return config

    def save(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        config_file = self.config_file

        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, 'w') as f:
                json.dump(config.model_dump(), f, indent=2)
            print(f"Configuration saved to {config_file}")
        except OSError as e:
            print(f"Error saving config to {config_file}: {e}")

    def setting_names(self) -> List[str]:
        """Get every settable key in ``section.field`` form."""
        return [
            f"{section}.{field}"
            for section, fields in self.config.model_dump().items()
            for field in fields
        ]

    def update(self, **settings: Any) -> Config:
        """Apply ``section.field`` overrides, validate and save.

        Unknown keys raise KeyError. Invalid values raise ValidationError and
        leave the current configuration untouched.
        """
        data = self.config.model_dump()

        for name, value in settings.items():
            section, _, field = name.partition('.')
            if field not in data.get(section, {}):
                raise KeyError(f"Unknown setting: {name}")
            data[section][field] = value

        self._config = Config.model_validate(data)
        self.save()
        return self._config

    def reset_to_defaults(self) -> None:
        """Reset configuration to defaults."""
        self._config = Config()
        self.save()


# Global config manager instance
config_manager = ConfigManager()
