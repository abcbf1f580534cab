from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BuildSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DOCBUILD_", case_sensitive=False)

    source_dir: Path = Path("source")
    output_dir: Path = Path("dist")
    asset_dir_name: str = "assets"
    partial_prefix: str = "_"
    template_suffix: str = ".j2"
    strip_partials: bool = True
    include_hidden: bool = False
    file_mode: int = 0o644

    @field_validator("partial_prefix")
    @classmethod
    def check_prefix(cls, value: str) -> str:
        if not value:
            raise ValueError("partial_prefix must not be empty")
        return value

    @field_validator("template_suffix")
    @classmethod
    def check_suffix(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"template_suffix must look like '.ext', got {value!r}")
        return value

    @field_validator("asset_dir_name")
    @classmethod
    def check_asset_dir(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError(f"asset_dir_name must be a bare directory name, got {value!r}")
        return value

    @property
    def asset_source(self) -> Path:
        return self.source_dir / self.asset_dir_name

    def partial_filename(self, logical_name: str) -> str:
        """File name of the partial referenced as ``logical_name``."""
        return f"{self.partial_prefix}{logical_name}{self.template_suffix}"
