"""Configuration system for namegen.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (NAMEGEN_*) -> .env file -> field defaults.

Configuration is read once at startup. Nothing in it changes per request;
the random source type only decides how each request's fresh source is built.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from namegen.exceptions import ConfigValidationError

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})


class NamegenConfig(BaseSettings):
    """Configuration for namegen.

    Resolution order: init kwargs -> env vars (NAMEGEN_*) -> .env file -> defaults.

    Fields are divided into groups:
    - **Data sources**: where the template text and word table are read from.
    - **Randomness**: which random source each request gets.
    - **Parsing / batching**: nesting guard and default batch shape.
    - **Logging**: verbosity and in-memory diagnostic mode.
    """

    model_config = SettingsConfigDict(
        env_prefix="NAMEGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Data sources ---

    template_path: str = Field(
        default="nameConstruction.txt",
        description="Path of the construction-language template file",
    )
    word_table_path: str = Field(
        default="names.tsv",
        description="Path of the tab-separated word table",
    )
    substitutions: dict[str, str] = Field(
        default_factory=dict,
        description="Literal substitutions available to @key tokens (JSON in env)",
    )

    # --- Randomness ---

    random_source_type: str = Field(
        default="clock",
        description="Per-request random source: 'clock', 'system', 'seeded'",
    )
    random_seed: int | None = Field(
        default=None,
        description="Base seed for the 'seeded' random source",
    )

    # --- Parsing ---

    max_nesting_depth: int = Field(
        default=64,
        description="Maximum nesting of {} [] -+ constructs accepted by the parser",
    )

    # --- Batching ---

    default_batch_size: int = Field(
        default=20,
        description="Number of names generated when a batch arrives empty",
    )
    default_female_ratio: float = Field(
        default=0.4,
        description="Share of default-batch requests assigned the 'female' category",
    )
    default_male_ratio: float = Field(
        default=0.4,
        description="Share of default-batch requests assigned the 'male' category",
    )

    # --- Logging ---

    log_level: str = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all generation records in memory for analysis",
    )


def validate_config(config: NamegenConfig) -> None:
    """Reject configurations that cannot drive a generator.

    Args:
        config: The configuration to check.

    Raises:
        ConfigValidationError: If any field holds an unusable value.
    """
    # Imported here so built-in sources are registered before the lookup.
    from namegen.entropy import RandomSourceRegistry

    if config.log_level not in _LOG_LEVELS:
        raise ConfigValidationError(
            f"Unknown log_level {config.log_level!r}. "
            f"Available: {', '.join(sorted(_LOG_LEVELS))}"
        )
    available = RandomSourceRegistry.list_available()
    if config.random_source_type not in available:
        raise ConfigValidationError(
            f"Unknown random_source_type {config.random_source_type!r}. "
            f"Available: {', '.join(available)}"
        )
    if config.random_source_type == "seeded" and config.random_seed is None:
        raise ConfigValidationError("random_source_type 'seeded' requires random_seed")
    if config.max_nesting_depth < 1:
        raise ConfigValidationError(
            f"max_nesting_depth must be >= 1, got {config.max_nesting_depth}"
        )
    if config.default_batch_size < 0:
        raise ConfigValidationError(
            f"default_batch_size must be >= 0, got {config.default_batch_size}"
        )
    for field_name in ("default_female_ratio", "default_male_ratio"):
        value = getattr(config, field_name)
        if not 0.0 <= value <= 1.0:
            raise ConfigValidationError(f"{field_name} must be in [0, 1], got {value}")
    if config.default_female_ratio + config.default_male_ratio > 1.0:
        raise ConfigValidationError(
            "default_female_ratio + default_male_ratio must not exceed 1.0"
        )
