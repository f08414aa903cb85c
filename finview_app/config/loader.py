"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError, GeneratorConfigError
from .defaults import (
    CurrencyParams,
    DefaultConfig,
    EventShock,
    GeneratorParams,
    IndexParams,
    SnapshotParams,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_FILENAME = "generator.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML file in the config directory."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{config_file} must contain a mapping at the top level",
                context={"path": str(config_file)},
            )
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Config file overrides
        3. Global defaults (lowest priority)
        """
        config = asdict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge, validate and build the typed configuration.

        Raises:
            GeneratorConfigError: If generator parameters are invalid
            ConfigurationError: If any other section is invalid
        """
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            generator_errors = [e for e in errors if e.field.startswith("generator.")]
            summary = "; ".join(f"{e.field}: {e.message}" for e in errors)
            if generator_errors and len(generator_errors) == len(errors):
                raise GeneratorConfigError(f"Invalid generator configuration: {summary}",
                                           errors=errors)
            raise ConfigurationError(f"Invalid configuration: {summary}",
                                     context={"errors": errors})

        return build_config(config)

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_config(config: dict[str, Any]) -> DefaultConfig:
    """Build typed configuration from an already validated dictionary."""
    generator = config["generator"]
    snapshots = config["snapshots"]

    return DefaultConfig(
        generator=GeneratorParams(
            indices={
                name: IndexParams(**params)
                for name, params in generator["indices"].items()
            },
            target_annual_growth=float(generator["target_annual_growth"]),
            trading_days_per_year=generator["trading_days_per_year"],
            event_spread_days=generator["event_spread_days"],
            events=tuple(EventShock(**event) for event in generator["events"]),
        ),
        currency=CurrencyParams(**config["currency"]),
        snapshots=SnapshotParams(
            files=dict(snapshots["files"]),
            years=tuple(snapshots["years"]),
        ),
    )
