"\"\"\"Pydantic configuration schema for CLI YAML input.\"\"\""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

Scope = Literal["all", "assigned_by_current_user"]


class EngineConfig(BaseModel):
    normalize_email: bool = False
    zero_means_unrated: bool = False

    model_config = ConfigDict(extra="forbid")


class RefreshConfig(BaseModel):
    max_workers: int = Field(default=8, ge=1)
    scope: Scope = "all"

    model_config = ConfigDict(extra="forbid")


class ApiConfig(BaseModel):
    base_url: str | None = None
    token: str | None = None
    timeout: float = Field(default=10.0, gt=0)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    engine: EngineConfig = Field(default_factory=EngineConfig)
    refresh: RefreshConfig = Field(default_factory=RefreshConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {
            "engine": self.engine.model_dump(),
            "refresh": self.refresh.model_dump(),
        }
        api_settings = self.api.model_dump(exclude_none=True)
        if api_settings.get("base_url"):
            settings["api"] = api_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
