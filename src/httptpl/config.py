"""Provider options and YAML config loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_TIMEOUT = 30.0


class ProviderConfig(BaseModel):
    """Options understood by template providers and sources.

    Keys may be given in the host's upper-case spelling (``INCLUDE_PATH``)
    or in snake case (``include_path``). Unknown keys are ignored so one
    mapping can be shared by several providers.
    """

    model_config = ConfigDict(extra="ignore")

    include_path: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("INCLUDE_PATH", "include_path"),
    )
    debug: bool = Field(False, validation_alias=AliasChoices("DEBUG", "debug"))
    client: Any = Field(None, validation_alias=AliasChoices("CLIENT", "UA", "client"))
    timeout: float = Field(DEFAULT_TIMEOUT, validation_alias=AliasChoices("TIMEOUT", "timeout"))
    tolerant: bool = Field(False, validation_alias=AliasChoices("TOLERANT", "tolerant"))
    absolute: bool = Field(False, validation_alias=AliasChoices("ABSOLUTE", "absolute"))
    default: str | None = Field(None, validation_alias=AliasChoices("DEFAULT", "default"))

    @field_validator("include_path", mode="before")
    @classmethod
    def _coerce_include_path(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (str, Path)):
            return [str(value)]
        if isinstance(value, (list, tuple)):
            return [str(v) if isinstance(v, Path) else v for v in value]
        return value

    @classmethod
    def from_options(cls, options: ProviderConfig | dict[str, Any] | None) -> ProviderConfig:
        """Build a config from a mapping, a config, or nothing."""
        if options is None:
            return cls()
        if isinstance(options, ProviderConfig):
            return options.model_copy()
        return cls.model_validate(options)


def load_config(path: str | Path) -> ProviderConfig:
    """Read provider options from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = yaml.safe_load(path.read_text())
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping")

    return ProviderConfig.model_validate(data)
