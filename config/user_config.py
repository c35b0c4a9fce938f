"""
User Configuration Handler

Manages the per-user YAML configuration file holding default values for
every capture knob (which sources to record, device indexes, extra ffmpeg
arguments, output location). Command-line flags override these values.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from config.settings import (
    DEFAULT_AUDIO_ARGS,
    DEFAULT_CAMERA_ARGS,
    DEFAULT_CAMERA_MARGIN,
    DEFAULT_CAMERA_POSITION,
    DEFAULT_EXTENSION,
    DEFAULT_FILENAME_FORMAT,
    DEFAULT_OUTPUT_ARGS,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_RECORD_AUDIO,
    DEFAULT_RECORD_CAMERA,
    DEFAULT_RECORD_SCREEN,
    DEFAULT_SCREEN_ARGS,
    FFMPEG_BINARY,
    USER_CONFIG_PATH,
)
from core.errors import ConfigError

CAMERA_POSITIONS = ("top-left", "top-right", "bottom-left", "bottom-right")

BOOLEAN_KEYS = ("record_screen", "record_audio", "record_camera")
DEVICE_KEYS = ("screen_device", "audio_device", "camera_device")
STRING_KEYS = (
    "screen_args",
    "audio_args",
    "camera_args",
    "output_args",
    "output_dir",
    "filename_format",
    "ffmpeg",
)


class UserConfig:
    """
    User configuration with YAML file support.

    Reads from ~/.config/screencast/config.yaml if it exists,
    otherwise writes one populated with defaults from config/settings.py.

    Usage:
        config = UserConfig()
        if config.record_screen:
            args = config.screen_args
    """

    def __init__(self, config_path: Optional[Path] = None, create: bool = True):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (None = use default)
            create: Write a default file when none exists

        Raises:
            ConfigError: File exists but is malformed or invalid
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path or USER_CONFIG_PATH).expanduser()
        self.create = create

        # Load configuration (defaults + file overrides)
        self._config = self._load_config()

    @staticmethod
    def get_defaults() -> Dict[str, Any]:
        """Get default configuration values from settings"""
        return {
            # Sources recorded when no -s/-a/-c flag is given
            'record_screen': DEFAULT_RECORD_SCREEN,
            'record_audio': DEFAULT_RECORD_AUDIO,
            'record_camera': DEFAULT_RECORD_CAMERA,

            # Device index per source (null = ask when several exist)
            'screen_device': None,
            'audio_device': None,
            'camera_device': None,

            # Extra ffmpeg arguments
            'screen_args': DEFAULT_SCREEN_ARGS,
            'audio_args': DEFAULT_AUDIO_ARGS,
            'camera_args': DEFAULT_CAMERA_ARGS,
            'output_args': DEFAULT_OUTPUT_ARGS,

            # Output file
            'extension': DEFAULT_EXTENSION,
            'output_dir': DEFAULT_OUTPUT_DIR,
            'filename_format': DEFAULT_FILENAME_FORMAT,

            # Camera overlay when recording screen and camera together
            'camera_position': DEFAULT_CAMERA_POSITION,
            'camera_margin': DEFAULT_CAMERA_MARGIN,

            'ffmpeg': FFMPEG_BINARY,
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file or use defaults"""
        config = self.get_defaults()

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    file_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(
                    f"Cannot read config file {self.config_path}: {e}"
                ) from e

            if file_config is None:
                file_config = {}
            if not isinstance(file_config, dict):
                raise ConfigError(
                    f"Config file {self.config_path} must contain a mapping "
                    f"of settings, got {type(file_config).__name__}"
                )

            # YAML keys are not always strings (e.g. "1: x")
            unknown = sorted(str(key) for key in set(file_config) - set(config))
            if unknown:
                self.logger.warning(
                    f"Ignoring unknown config keys in {self.config_path}: "
                    f"{', '.join(unknown)}"
                )

            # File overrides defaults
            config.update(file_config)
            self.logger.info(f"Loaded config from {self.config_path}")

        elif self.create:
            self.logger.info(
                f"Config file not found at {self.config_path}. "
                f"Creating default config file..."
            )
            self._save_config(config)

        self._validate_config(config)
        return config

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        for key in BOOLEAN_KEYS:
            if not isinstance(config[key], bool):
                raise ConfigError(f"{key} must be true or false, got {config[key]!r}")

        for key in DEVICE_KEYS:
            value = config[key]
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(
                    f"{key} must be empty or a device number (0, 1, ...), got {value!r}"
                )

        for key in STRING_KEYS:
            if config[key] is None:
                config[key] = ""
            if not isinstance(config[key], str):
                raise ConfigError(f"{key} must be a string, got {config[key]!r}")

        extension = config['extension']
        if (
            not isinstance(extension, str)
            or not extension
            or "." in extension
            or "/" in extension
        ):
            raise ConfigError(
                f"extension must be a plain file extension like 'mkv', got {extension!r}"
            )

        if config['camera_position'] not in CAMERA_POSITIONS:
            raise ConfigError(
                f"camera_position must be one of {', '.join(CAMERA_POSITIONS)}, "
                f"got {config['camera_position']!r}"
            )

        margin = config['camera_margin']
        if isinstance(margin, bool) or not isinstance(margin, int) or margin < 0:
            raise ConfigError(f"camera_margin must be a non-negative integer, got {margin!r}")

    def _save_config(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Save configuration to YAML file"""
        if config is None:
            config = self._config

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, 'w') as f:
                yaml.dump(
                    config,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    indent=2
                )

            self.logger.info(f"Config saved to {self.config_path}")

        except OSError as e:
            # A read-only home must not stop a recording
            self.logger.warning(f"Failed to save config: {e}")

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def record_screen(self) -> bool:
        """Record the screen when no source flag is given"""
        return self._config['record_screen']

    @property
    def record_audio(self) -> bool:
        """Record a microphone when no source flag is given"""
        return self._config['record_audio']

    @property
    def record_camera(self) -> bool:
        """Record a camera when no source flag is given"""
        return self._config['record_camera']

    @property
    def screen_device(self) -> Optional[int]:
        return self._config['screen_device']

    @property
    def audio_device(self) -> Optional[int]:
        return self._config['audio_device']

    @property
    def camera_device(self) -> Optional[int]:
        return self._config['camera_device']

    @property
    def screen_args(self) -> str:
        return self._config['screen_args']

    @property
    def audio_args(self) -> str:
        return self._config['audio_args']

    @property
    def camera_args(self) -> str:
        return self._config['camera_args']

    @property
    def output_args(self) -> str:
        return self._config['output_args']

    @property
    def extension(self) -> str:
        return self._config['extension']

    @property
    def output_dir(self) -> Path:
        """Directory recordings are written to (user home expanded)"""
        return Path(self._config['output_dir']).expanduser()

    @property
    def filename_format(self) -> str:
        """strftime format of generated file names"""
        return self._config['filename_format']

    @property
    def camera_position(self) -> str:
        return self._config['camera_position']

    @property
    def camera_margin(self) -> int:
        return self._config['camera_margin']

    @property
    def ffmpeg(self) -> str:
        """ffmpeg binary name or path"""
        return self._config['ffmpeg'] or FFMPEG_BINARY

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any, save: bool = True) -> None:
        """
        Set configuration value.

        Args:
            key: Configuration key
            value: New value
            save: If True, save to file immediately

        Raises:
            ConfigError: Value is invalid for that key
        """
        updated = self._config.copy()
        updated[key] = value
        self._validate_config(updated)
        self._config = updated

        if save:
            self._save_config()

    def reload(self) -> None:
        """Reload configuration from file"""
        self._config = self._load_config()
        self.logger.info("Configuration reloaded")

    def to_dict(self) -> Dict[str, Any]:
        """Get configuration as dictionary"""
        return self._config.copy()

    def __repr__(self) -> str:
        return f"UserConfig(path={self.config_path})"
