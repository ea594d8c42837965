"""
Configuration module using dataclasses for type-safe, clean configuration management.

Holds the market conventions used by the pricing formulas (risk-free rate,
day count) and the presentation settings of the spreadsheet formulas.
"""

import math
from dataclasses import dataclass, field, asdict
from typing import Literal, Optional, Dict, Any
from pathlib import Path
import yaml


DEFAULT_RISK_FREE_RATE = 0.0525
DAYS_PER_YEAR = 365.0
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def _is_real(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


@dataclass
class PricingConfig:
    """Market conventions for Black-Scholes pricing."""

    risk_free_rate: float = DEFAULT_RISK_FREE_RATE  # Annual, continuously compounded
    days_per_year: float = DAYS_PER_YEAR  # Maturities are quoted in calendar days

    def __post_init__(self):
        """Validate configuration parameters."""
        assert _is_real(self.risk_free_rate), \
            f"Risk-free rate must be a real number, got {self.risk_free_rate!r}"
        assert _is_real(self.days_per_year), \
            f"Days per year must be a real number, got {self.days_per_year!r}"
        assert self.days_per_year > 0, "Days per year must be positive"


@dataclass
class SequenceConfig:
    """Output shape of sequences returned to the sheet."""

    orientation: Literal['column', 'row'] = 'column'

    def __post_init__(self):
        """Validate configuration parameters."""
        assert self.orientation in ('column', 'row'), \
            f"Orientation must be 'column' or 'row', got {self.orientation}"


@dataclass
class SheetConfig:
    """Top-level configuration combining all sub-configs."""

    name: str = "options_sheet"

    # Sub-configurations
    pricing: PricingConfig = field(default_factory=PricingConfig)
    sequence: SequenceConfig = field(default_factory=SequenceConfig)

    # Logging
    log_level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR'] = 'WARNING'
    log_dir: Optional[Path] = None  # File logging is enabled only when set
    json_logs: bool = False

    def __post_init__(self):
        """Validate configuration parameters."""
        assert isinstance(self.pricing, PricingConfig), "pricing must be a mapping"
        assert isinstance(self.sequence, SequenceConfig), "sequence must be a mapping"
        assert self.log_level in LOG_LEVELS, \
            f"Log level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
        assert isinstance(self.json_logs, bool), \
            f"json_logs must be true or false, got {self.json_logs!r}"
        if self.log_dir is not None:
            self.log_dir = Path(self.log_dir)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        config_dict = asdict(self)
        if self.log_dir is not None:
            config_dict['log_dir'] = str(self.log_dir)
        return config_dict

    def save(self, path: Path) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'SheetConfig':
        """Load configuration from dictionary."""
        if not isinstance(config_dict, dict):
            raise ValueError(
                f"Configuration must be a mapping, got {type(config_dict).__name__}"
            )
        config_dict = dict(config_dict)
        # Convert nested dicts to dataclasses
        if 'pricing' in config_dict and isinstance(config_dict['pricing'], dict):
            config_dict['pricing'] = PricingConfig(**config_dict['pricing'])
        if 'sequence' in config_dict and isinstance(config_dict['sequence'], dict):
            config_dict['sequence'] = SequenceConfig(**config_dict['sequence'])

        return cls(**config_dict)

    @classmethod
    def load(cls, path: Path) -> 'SheetConfig':
        """Load configuration from YAML file."""
        path = Path(path)
        with open(path, 'r') as f:
            config_dict = yaml.safe_load(f) or {}
        return cls.from_dict(config_dict)


def get_default_config() -> SheetConfig:
    """Get default configuration."""
    return SheetConfig()
