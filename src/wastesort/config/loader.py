"""Configuration loading from CLI and programmatic sources."""

import logging
from pathlib import Path
from dataclasses import replace
from wastesort.config.settings import (
    Settings, ModelSettings, PixelSettings, DefaultSettings,
    UploadSettings, LoggingSettings, LogLevel, MIB
)
from wastesort.config.resolvers import default_model_cache_dir
from wastesort.domain.exceptions import ConfigurationError
from wastesort.domain.models import Bucket

logger = logging.getLogger(__name__)

class ConfigurationLoader:
    """Loads configuration from CLI args and system defaults."""

    def load_from_cli_args(self, args) -> Settings:
        """Load configuration from CLI arguments."""
        try:
            settings = self.load_defaults()

            # Model tier updates
            model_updates = {}
            if getattr(args, 'no_model', False):
                model_updates['enabled'] = False
            if getattr(args, 'model_cache', None):
                model_updates['cache_dir'] = Path(args.model_cache)
            if getattr(args, 'min_score', None) is not None:
                model_updates['min_score'] = float(args.min_score)

            # Pixel tier updates
            pixel_updates = {}
            if getattr(args, 'dark_brightness_max', None) is not None:
                pixel_updates['dark_brightness_max'] = float(args.dark_brightness_max)

            # Upload limits
            upload_updates = {}
            if getattr(args, 'max_size_mb', None) is not None:
                upload_updates['max_bytes'] = int(float(args.max_size_mb) * MIB)

            # Logging settings updates
            logging_updates = {}
            if getattr(args, 'log_file', None):
                logging_updates['file_path'] = Path(args.log_file)
            if getattr(args, 'debug', False):
                logging_updates['level'] = LogLevel.DEBUG

            # Input handling
            input_files = []
            input_directory = None

            if getattr(args, 'input', None):
                input_files = [Path(f) for f in args.input]
            elif getattr(args, 'input_dir', None):
                input_directory = Path(args.input_dir)

            return replace(
                settings,
                model=replace(settings.model, **model_updates),
                pixel=replace(settings.pixel, **pixel_updates),
                upload=replace(settings.upload, **upload_updates),
                logging=replace(settings.logging, **logging_updates),
                input_files=input_files,
                input_directory=input_directory,
                recursive=bool(getattr(args, 'recursive', False)),
                seed=getattr(args, 'seed', None),
                output_json=bool(getattr(args, 'json', False)),
                debug_mode=bool(getattr(args, 'debug', False)),
                dry_run=bool(getattr(args, 'dry_run', False)),
            )

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Failed to load configuration from CLI arguments: {str(e)}"
            ) from e

    def load_defaults(self) -> Settings:
        """Load default configuration settings."""
        return Settings(
            model=ModelSettings(
                enabled=True,
                architecture="mobilenet_v2",
                input_size=224,
                band_edges=(200, 600, 800),
                min_score=0.05,
                confidence_boost=1.2,
                confidence_cap=0.95,
                cache_dir=default_model_cache_dir(),
            ),
            pixel=PixelSettings(),
            default=DefaultSettings(
                bucket=Bucket.GENERAL,
                confidence=0.3,
            ),
            upload=UploadSettings(
                max_bytes=5 * MIB,
                media_type_prefix="image/",
            ),
            logging=LoggingSettings(
                level=LogLevel.INFO,
                file_path=None,
                console_output=True,
            ),
            seed=None,
            debug_mode=False,
            dry_run=False,
        )

def configure_from_cli(args) -> Settings:
    """Main entry point to configure settings from CLI args."""
    loader = ConfigurationLoader()
    settings = loader.load_from_cli_args(args)
    settings.validate(require_inputs=getattr(args, 'cmd', None) == "classify")
    return settings
