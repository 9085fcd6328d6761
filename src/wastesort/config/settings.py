"""Core configuration settings for wastesort."""

import logging
from pathlib import Path
from typing import Optional, List, Tuple
from dataclasses import dataclass, field
from enum import Enum

from wastesort.domain.exceptions import PipelineConfigurationError as ConfigurationError
from wastesort.domain.models import Bucket

logger = logging.getLogger(__name__)

MIB = 1024 * 1024

class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

def _check_fraction(value: float, config_field: str) -> None:
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(
            f"{config_field.rsplit('.', 1)[-1]} must be between 0 and 1",
            config_field=config_field
        )

@dataclass
class ModelSettings:
    """Pretrained-model tier configuration."""
    enabled: bool = True
    architecture: str = "mobilenet_v2"
    input_size: int = 224
    mean: Tuple[float, float, float] = (0.485, 0.456, 0.406)
    std: Tuple[float, float, float] = (0.229, 0.224, 0.225)
    num_classes: int = 1000
    # class-index bands: [0, e0) organic, [e0, e1) recyclable, [e1, e2) electronic, rest general
    band_edges: Tuple[int, int, int] = (200, 600, 800)
    min_score: float = 0.05
    confidence_boost: float = 1.2
    confidence_cap: float = 0.95
    min_items: int = 2
    max_items: int = 3
    cache_dir: Optional[Path] = None

    def validate(self) -> None:
        """Validate model settings."""
        valid_architectures = {"mobilenet_v2", "mobilenet_v3_small", "mobilenet_v3_large"}
        if self.architecture not in valid_architectures:
            raise ConfigurationError(
                f"Invalid model architecture: {self.architecture}",
                config_field="model.architecture"
            ).add_suggestion(f"Use one of: {sorted(valid_architectures)}")

        if self.input_size <= 0:
            raise ConfigurationError(
                "input_size must be positive",
                config_field="model.input_size"
            )

        edges = list(self.band_edges)
        if len(edges) != 3 or edges != sorted(edges) or edges[0] <= 0 or edges[-1] >= self.num_classes:
            raise ConfigurationError(
                f"band_edges must be three increasing indices inside (0, {self.num_classes})",
                config_field="model.band_edges"
            )

        _check_fraction(self.min_score, "model.min_score")
        _check_fraction(self.confidence_cap, "model.confidence_cap")

        if self.confidence_boost <= 0:
            raise ConfigurationError(
                "confidence_boost must be positive",
                config_field="model.confidence_boost"
            )

        if self.min_items < 1 or self.max_items < self.min_items:
            raise ConfigurationError(
                "item counts must satisfy 1 <= min_items <= max_items",
                config_field="model.min_items"
            )

@dataclass
class PixelSettings:
    """Pixel-colour heuristic configuration."""
    sample_size: int = 100
    green_ratio: float = 0.3
    brown_ratio: float = 0.2
    yellow_ratio: float = 0.2
    metallic_ratio: float = 0.4
    dark_ratio: float = 0.5
    dark_brightness_max: float = 50.0
    metallic_channel_min: int = 150
    metallic_max_spread: int = 30
    dark_channel_max: int = 60
    base_confidence: float = 0.7
    confidence_spread: float = 0.2
    min_items: int = 1
    max_items: int = 2

    def validate(self) -> None:
        """Validate pixel heuristic settings."""
        if self.sample_size <= 0:
            raise ConfigurationError(
                "sample_size must be positive",
                config_field="pixel.sample_size"
            )

        for name in ("green_ratio", "brown_ratio", "yellow_ratio", "metallic_ratio", "dark_ratio"):
            _check_fraction(getattr(self, name), f"pixel.{name}")

        if not 0.0 <= self.dark_brightness_max <= 255.0:
            raise ConfigurationError(
                "dark_brightness_max must be between 0 and 255",
                config_field="pixel.dark_brightness_max"
            )

        _check_fraction(self.base_confidence, "pixel.base_confidence")
        if self.confidence_spread < 0:
            raise ConfigurationError(
                "confidence_spread must be non-negative",
                config_field="pixel.confidence_spread"
            )

        if self.min_items < 1 or self.max_items < self.min_items:
            raise ConfigurationError(
                "item counts must satisfy 1 <= min_items <= max_items",
                config_field="pixel.min_items"
            )

@dataclass
class DefaultSettings:
    """Answer used when the image is degenerate or every tier fails."""
    bucket: Bucket = Bucket.GENERAL
    confidence: float = 0.3
    item_count: int = 1

    def validate(self) -> None:
        """Validate default-tier settings."""
        if not isinstance(self.bucket, Bucket):
            raise ConfigurationError(
                f"Invalid default bucket: {self.bucket}",
                config_field="default.bucket",
                expected_type="Bucket"
            )
        _check_fraction(self.confidence, "default.confidence")
        if self.item_count < 1:
            raise ConfigurationError(
                "item_count must be at least 1",
                config_field="default.item_count"
            )

@dataclass
class UploadSettings:
    """Upload validation limits."""
    max_bytes: int = 5 * MIB
    media_type_prefix: str = "image/"
    extensions: Tuple[str, ...] = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp")

    def validate(self) -> None:
        """Validate upload settings."""
        if self.max_bytes <= 0:
            raise ConfigurationError(
                "max_bytes must be positive",
                config_field="upload.max_bytes"
            )

@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: LogLevel = LogLevel.INFO
    file_path: Optional[Path] = None
    console_output: bool = True
    # str.format style, applied to the log file
    format_string: str = "{asctime} {levelname:<7} {name} - {message}"

    def validate(self) -> None:
        """Validate logging settings."""
        if self.file_path and not self.file_path.parent.exists():
            raise ConfigurationError(
                f"Log directory does not exist: {self.file_path.parent}",
                config_field="logging.file_path"
            ).add_suggestion("Create the directory or use console logging only")

@dataclass
class Settings:
    """Main configuration settings for wastesort."""

    # Core settings
    model: ModelSettings = field(default_factory=ModelSettings)
    pixel: PixelSettings = field(default_factory=PixelSettings)
    default: DefaultSettings = field(default_factory=DefaultSettings)
    upload: UploadSettings = field(default_factory=UploadSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    # Runtime settings
    input_files: List[Path] = field(default_factory=list)
    input_directory: Optional[Path] = None
    recursive: bool = False
    seed: Optional[int] = None
    output_json: bool = False

    # Debug/development settings
    debug_mode: bool = False
    dry_run: bool = False

    def validate(self, require_inputs: bool = False) -> None:
        """Validate all configuration settings."""
        try:
            self.model.validate()
            self.pixel.validate()
            self.default.validate()
            self.upload.validate()
            self.logging.validate()

            if require_inputs:
                self._validate_input_sources()

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Configuration validation failed: {str(e)}"
            ) from e

    def _validate_input_sources(self) -> None:
        """Validate input file/directory configuration."""
        has_files = bool(self.input_files)
        has_directory = self.input_directory is not None

        if not has_files and not has_directory:
            raise ConfigurationError(
                "Either input_files or input_directory must be specified",
                config_field="input_sources"
            ).add_suggestion("Provide --input-dir or specific image paths")

        if has_files and has_directory:
            raise ConfigurationError(
                "Cannot specify both input_files and input_directory",
                config_field="input_sources"
            ).add_suggestion("Use either --input-dir OR specific image paths, not both")

        if has_directory and not self.input_directory.is_dir():
            raise ConfigurationError(
                f"Input directory does not exist: {self.input_directory}",
                config_field="input_directory"
            )

    def to_dict(self) -> dict:
        """Convert settings to dictionary for debugging."""
        return {
            'model': {
                'enabled': self.model.enabled,
                'architecture': self.model.architecture,
                'band_edges': list(self.model.band_edges),
                'min_score': self.model.min_score,
                'cache_dir': str(self.model.cache_dir) if self.model.cache_dir else None,
            },
            'pixel': {
                'sample_size': self.pixel.sample_size,
                'dark_brightness_max': self.pixel.dark_brightness_max,
            },
            'upload': {
                'max_bytes': self.upload.max_bytes,
                'media_type_prefix': self.upload.media_type_prefix,
            },
            'runtime': {
                'seed': self.seed,
                'output_json': self.output_json,
                'debug_mode': self.debug_mode,
                'dry_run': self.dry_run,
            }
        }

# Global settings instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get the current global settings instance."""
    global _settings
    if _settings is None:
        raise ConfigurationError(
            "Settings not initialized. Call set_settings() first."
        ).add_suggestion("Initialize settings in your application startup")
    return _settings

def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    settings.validate()
    _settings = settings
    logger.info("Configuration loaded and validated successfully")
