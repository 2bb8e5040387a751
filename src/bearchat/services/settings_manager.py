"""Settings Manager - Persisted translation settings and API key configuration."""

import base64
import binascii
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from bearchat.core import TranslationConfig
from bearchat.exceptions import ConfigurationError, StorageError
from bearchat.io import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL_NAME = "gpt-3.5-turbo"


def encode_credential(value: str) -> str:
    """
    Obfuscate a credential for the settings record.

    This is base64, NOT encryption: anyone with access to the store can read
    the key. It only keeps the key from being readable at a glance.
    """
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def decode_credential(value: str) -> str:
    """Reverse `encode_credential`. Undecodable input yields an empty string."""
    try:
        return base64.b64decode(value.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        return ""


@dataclass(frozen=True)
class Settings:
    """User-editable translation settings."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model_name: str = DEFAULT_MODEL_NAME


class SettingsManager:
    """
    Manages settings and API key configuration.

    The settings editor saves a JSON record under `STORAGE_KEY`. When no
    record exists, values fall back to environment variables, read from a
    `.env` file in the project root.
    """

    STORAGE_KEY = "bearchat-settings"

    ENV_API_KEY = "BEARCHAT_API_KEY"
    ENV_BASE_URL = "BEARCHAT_BASE_URL"
    ENV_MODEL_NAME = "BEARCHAT_MODEL_NAME"

    def __init__(self, store: KeyValueStore, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            store: Persistent store holding the settings record.
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        self._store = store
        self._project_root = project_root
        load_dotenv(dotenv_path=self._project_root / ".env")

    def load_settings(self) -> Optional[Settings]:
        """Read the persisted record. Missing or corrupt records yield None."""
        try:
            raw = self._store.get(self.STORAGE_KEY)
        except StorageError as e:
            logger.warning("Failed to read settings: %s", e)
            return None

        if not raw:
            return None

        try:
            data = json.loads(raw)
            api_key = data.get("apiKey") or ""
            base_url = data.get("baseUrl") or DEFAULT_BASE_URL
            model_name = data.get("modelName") or DEFAULT_MODEL_NAME
            if not all(isinstance(v, str) for v in (api_key, base_url, model_name)):
                raise TypeError("settings fields must be strings")
            return Settings(
                api_key=decode_credential(api_key),
                base_url=base_url,
                model_name=model_name,
            )
        except (json.JSONDecodeError, AttributeError, TypeError) as e:
            logger.warning("Ignoring corrupt settings record: %s", e)
            return None

    def save_settings(self, settings: Settings) -> None:
        """
        Validate and persist settings.

        Raises:
            ConfigurationError: If the base URL or model name is invalid.
            StorageError: If the store rejects the write.
        """
        TranslationConfig(
            api_key=settings.api_key,
            base_url=settings.base_url,
            model_name=settings.model_name,
        )
        record = {
            "apiKey": encode_credential(settings.api_key.strip()),
            "baseUrl": settings.base_url.strip(),
            "modelName": settings.model_name.strip(),
        }
        self._store.set(self.STORAGE_KEY, json.dumps(record))

    def load_translation_config(self) -> TranslationConfig:
        """
        Build a validated configuration for the translation service.

        Raises:
            ConfigurationError: If no API key is configured, or the base URL
                or model name is invalid.
        """
        settings = self.load_settings() or self._settings_from_env()

        if not settings.api_key.strip():
            raise ConfigurationError(
                "API key not configured. Add it in settings or set BEARCHAT_API_KEY."
            )

        return TranslationConfig(
            api_key=settings.api_key.strip(),
            base_url=settings.base_url.strip(),
            model_name=settings.model_name.strip(),
        )

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        load_dotenv(dotenv_path=self._project_root / ".env", override=True)

    def _settings_from_env(self) -> Settings:
        return Settings(
            api_key=os.getenv(self.ENV_API_KEY) or "",
            base_url=os.getenv(self.ENV_BASE_URL) or DEFAULT_BASE_URL,
            model_name=os.getenv(self.ENV_MODEL_NAME) or DEFAULT_MODEL_NAME,
        )
