"""
Configuration management using Pydantic Settings for robust validation and environment handling.
"""

from typing import Dict, Optional
from pydantic import Field
from pydantic_settings import BaseSettings
from pathlib import Path


class KitchenConfig(BaseSettings):
    """Kitchen equipment configuration."""

    stove_burners: int = Field(
        default=4,
        description="Number of burners on the stove"
    )
    oven_max_temperature: float = Field(
        default=300.0,
        description="Highest temperature the oven accepts for preheating"
    )
    tool_durability: int = Field(
        default=100,
        description="Number of uses before a tool wears out"
    )
    doneness_tolerance_minutes: int = Field(
        default=5,
        description="Allowed deviation from the expected baking time"
    )

    class Config:
        env_prefix = "KITCHEN_"


class PantryConfig(BaseSettings):
    """Pantry stock configuration."""

    stock_grams: Dict[str, float] = Field(
        default_factory=dict,
        description="Initial stock levels in grams, keyed by stock slug"
    )

    class Config:
        env_prefix = "PANTRY_"


class Settings(BaseSettings):
    """Main application settings."""

    # Environment
    environment: str = Field(
        default="development",
        description="Application environment"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Simulation
    cook_name: str = Field(
        default="Head cook",
        description="Display name of the cook"
    )
    narration: str = Field(
        default="console",
        description="Where cooking progress goes: console, log or silent"
    )

    # Component configurations
    kitchen: KitchenConfig = Field(default_factory=KitchenConfig)
    pantry: PantryConfig = Field(default_factory=PantryConfig)

    class Config:
        env_prefix = "CAREME_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """Load settings from a YAML file or the environment."""
    global _settings

    if config_file and Path(config_file).exists():
        import yaml
        with open(config_file) as f:
            config_data = yaml.safe_load(f) or {}

        transformed_data = {}

        # Top-level fields
        for key in ['environment', 'log_level', 'debug', 'cook_name', 'narration']:
            if key in config_data:
                transformed_data[key] = config_data[key]

        # Nested configurations
        if 'kitchen' in config_data:
            transformed_data['kitchen'] = KitchenConfig(**config_data['kitchen'])

        # A bare mapping under "pantry" is shorthand for stock levels
        if 'pantry' in config_data:
            pantry_data = config_data['pantry'] or {}
            if 'stock_grams' not in pantry_data:
                pantry_data = {'stock_grams': pantry_data}
            transformed_data['pantry'] = PantryConfig(**pantry_data)

        _settings = Settings(**transformed_data)
    else:
        _settings = Settings()

    return _settings
