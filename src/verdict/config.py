"""Settings for rendering check results."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VerdictSettings(BaseSettings):
    """Configuration read from the environment.

    Attributes
    ----------
    repr_max_length
        Longest parameter repr shown in a failure message before it is cut
        and suffixed with ``...`` (from ``VERDICT_REPR_MAX_LENGTH``).
    """

    repr_max_length: int = Field(default=80, ge=1, validation_alias="VERDICT_REPR_MAX_LENGTH")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="",
    )


_settings: VerdictSettings | None = None


def get_settings() -> VerdictSettings:
    """Return the process-wide settings (lazy init)."""

    global _settings
    if _settings is None:
        _settings = VerdictSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""

    global _settings
    _settings = None
