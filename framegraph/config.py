# framegraph/config.py

"""
Configuration for FrameGraph
Environment-backed defaults with validation
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Any

from .exceptions import GraphConfigurationError


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).lower() == 'true'


@dataclass
class FrameGraphConfig:
    """
    Runtime settings for motif compilation and graph conversion.
    Every field can be overridden through a FRAMEGRAPH_* environment variable.
    """

    # Logging and Debug
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv('FRAMEGRAPH_LOG_LEVEL', 'INFO'))
    ENABLE_PLAN_LOGGING: bool = field(default_factory=lambda: _env_flag('FRAMEGRAPH_PLAN_LOG'))
    SLOW_OPERATION_THRESHOLD: float = field(
        default_factory=lambda: float(os.getenv('FRAMEGRAPH_SLOW_THRESHOLD', '1.0'))
    )

    # Development and Testing (checks the result schema after every find)
    DEVELOPMENT_MODE: bool = field(default_factory=lambda: _env_flag('FRAMEGRAPH_DEV_MODE'))

    def __post_init__(self):
        """Post-initialization validation"""
        if str(self.LOG_LEVEL).upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise GraphConfigurationError(f"Invalid log level: {self.LOG_LEVEL}")

        if self.SLOW_OPERATION_THRESHOLD <= 0:
            raise GraphConfigurationError(f"Invalid slow operation threshold: {self.SLOW_OPERATION_THRESHOLD}")

    @classmethod
    def create_test_config(cls, **overrides) -> 'FrameGraphConfig':
        """
        Create a configuration specifically for testing

        Args:
            **overrides: Additional configuration overrides

        Returns:
            FrameGraphConfig instance for testing
        """
        settings = dict(
            LOG_LEVEL='DEBUG',
            ENABLE_PLAN_LOGGING=True,
            DEVELOPMENT_MODE=True,
        )
        settings.update(overrides)
        return cls(**settings)

    @classmethod
    def create_production_config(cls, **overrides) -> 'FrameGraphConfig':
        """Create a configuration for production use"""
        settings = dict(
            LOG_LEVEL='INFO',
            ENABLE_PLAN_LOGGING=False,
            DEVELOPMENT_MODE=False,
            SLOW_OPERATION_THRESHOLD=5.0,
        )
        settings.update(overrides)
        return cls(**settings)

    def update_from_dict(self, config_dict: Dict[str, Any]) -> None:
        """
        Update configuration from dictionary

        Args:
            config_dict: Dictionary of configuration values
        """
        for key, value in config_dict.items():
            if hasattr(self, key):
                setattr(self, key, value)
            else:
                raise GraphConfigurationError(f"Unknown configuration key: {key}")
        self.__post_init__()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            field.name: getattr(self, field.name)
            for field in self.__dataclass_fields__.values()
        }


def create_test_config(**kwargs) -> FrameGraphConfig:
    """Create test configuration"""
    return FrameGraphConfig.create_test_config(**kwargs)


def create_production_config(**kwargs) -> FrameGraphConfig:
    """Create production configuration"""
    return FrameGraphConfig.create_production_config(**kwargs)
