# Path: pod_verifier/core/config_loader.py
"""
Configuration Loader for POD Verifier

Loads configuration from .env file for the verifier.
Singleton pattern ensures consistent configuration across all components.

Every setting has a default, so the verifier runs without a .env file.
"""

import os
from typing import Any, Optional
from pathlib import Path
from dotenv import load_dotenv

from ..constants import MAX_INPUT_LENGTH, SHARE_QUERY_PARAM, DEFAULT_SHARE_BASE_URL


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

DEFAULT_ENVIRONMENT: str = 'development'
DEFAULT_LOG_LEVEL: str = 'INFO'


class ConfigLoader:
    """
    Singleton configuration loader for the verifier.

    Loads configuration from environment variables with type conversion
    and sensible defaults.

    Example:
        config = ConfigLoader()
        limit = config.get('max_input_length')  # Returns int
        engine_path = config.get('engine')      # Returns 'module:factory' or None
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env file
        on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        # pod_verifier/core/config_loader.py -> go up 3 levels to project root
        current_file = Path(__file__).resolve()
        project_root = current_file.parent.parent.parent
        env_path = project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('POD_VERIFIER_ENVIRONMENT', DEFAULT_ENVIRONMENT),
            'debug': self._get_bool('POD_VERIFIER_DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('POD_VERIFIER_LOG_DIR'),
            'log_level': self._get_env('POD_VERIFIER_LOG_LEVEL', DEFAULT_LOG_LEVEL),

            # ================================================================
            # VERIFICATION CONFIGURATION
            # ================================================================
            'max_input_length': self._get_int(
                'POD_VERIFIER_MAX_INPUT_LENGTH', MAX_INPUT_LENGTH
            ),
            'engine': self._get_env('POD_VERIFIER_ENGINE'),

            # ================================================================
            # SHARE LINKS
            # ================================================================
            'share_base_url': self._get_env(
                'POD_VERIFIER_SHARE_BASE_URL', DEFAULT_SHARE_BASE_URL
            ),
            'share_param': self._get_env('POD_VERIFIER_SHARE_PARAM', SHARE_QUERY_PARAM),
        }

        return config

    def _get_env(
        self,
        key: str,
        default: Optional[str] = None,
        required: bool = False
    ) -> Optional[str]:
        """Get string environment variable."""
        value = os.getenv(key)

        if value is None or not value.strip():
            if required:
                raise ValueError(f"Required environment variable '{key}' is not set")
            return default

        return value.strip()

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default

        return value.strip().lower() in ('true', '1', 'yes', 'on')

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value.strip())
        except ValueError:
            return default

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """Get path environment variable."""
        value = os.getenv(key)

        if value is None or not value.strip():
            if required:
                raise ValueError(f"Required environment variable '{key}' is not set")
            return None

        return Path(value.strip())

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        value = self._config.get(key)
        return default if value is None else value

    def __getitem__(self, key: str) -> Any:
        """Get configuration value using dictionary syntax."""
        return self._config[key]

    def __contains__(self, key: str) -> bool:
        """Check if configuration key exists."""
        return key in self._config

    def keys(self):
        """Get all configuration keys."""
        return self._config.keys()

    def items(self):
        """Get all configuration key-value pairs."""
        return self._config.items()

    @classmethod
    def reset(cls):
        """Reset singleton for testing purposes."""
        cls._instance = None
        cls._initialized = False


__all__ = ['ConfigLoader']
