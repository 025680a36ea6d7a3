"""
Configuration Loader

Handles loading and validation of configuration.
"""

import logging
from typing import Optional, Dict, Any

from dotenv import load_dotenv

from ..exceptions import ConfigurationError
from .settings import APIConfig, Settings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and manages client configuration."""

    _instance: Optional['ConfigLoader'] = None
    _settings: Optional[Settings] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def load_config(
        cls,
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None
    ) -> Settings:
        """
        Load configuration from environment and files.

        Args:
            env_file: Path to .env file
            overrides: API config values taking precedence over the environment

        Returns:
            Loaded settings
        """
        if cls._settings is not None:
            return cls._settings

        if env_file:
            # Existing environment variables win over the file
            load_dotenv(env_file, override=False)

        try:
            api_config = APIConfig(**(overrides or {}))
            cls._settings = Settings(api=api_config)
        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")
            raise ConfigurationError(
                "Invalid or incomplete configuration",
                original_exception=e
            ) from e

        logger.info(
            f"Configuration loaded successfully "
            f"(debug={cls._settings.debug})"
        )

        # Log non-sensitive config info
        cls._log_config_info()

        return cls._settings

    @classmethod
    def get_settings(cls) -> Settings:
        """
        Get current settings instance.

        Returns:
            Current settings

        Raises:
            ConfigurationError: If config not loaded
        """
        if cls._settings is None:
            raise ConfigurationError(
                "Configuration not loaded. Call load_config() first."
            )
        return cls._settings

    @classmethod
    def reload_config(
        cls,
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None
    ) -> Settings:
        """
        Reload configuration.

        Args:
            env_file: Path to .env file
            overrides: API config values taking precedence over the environment

        Returns:
            Reloaded settings
        """
        cls._settings = None
        return cls.load_config(env_file, overrides)

    @classmethod
    def _log_config_info(cls) -> None:
        """Log non-sensitive configuration information."""
        if not cls._settings:
            return

        logger.info(f"App: {cls._settings.app_name}")
        logger.info(f"Region: {cls._settings.api.region}")
        logger.info(f"Locale: {cls._settings.api.locale}")
        logger.info(f"API host: {cls._settings.api.region}.{cls._settings.api.api_host}")

    @classmethod
    def validate_config(cls) -> bool:
        """
        Validate current configuration.

        Returns:
            True if config is valid
        """
        if not cls._settings:
            logger.error("No configuration loaded")
            return False

        required_checks = [
            (cls._settings.api.client_id, "Battle.net Client ID"),
            (cls._settings.api.client_secret, "Battle.net Client Secret"),
        ]

        for value, name in required_checks:
            if not value or not value.strip():
                logger.error(f"Missing required config: {name}")
                return False

        if cls._settings.api.timeout <= 0:
            logger.error(f"Invalid timeout: {cls._settings.api.timeout}")
            return False

        return True


# Convenience function
def get_settings() -> Settings:
    """Get current settings instance."""
    return ConfigLoader.get_settings()
