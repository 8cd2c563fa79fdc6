from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.series import DistributionKind, DistributionSpec


class SamplingConfig(BaseModel):
    """How the observation series is drawn."""

    n: int = Field(10_000, ge=1, description="Number of observations per run")
    seed: int = Field(42, description="Seed for the run's random generator")
    distribution: DistributionKind = Field(
        DistributionKind.INVERSE_SQUARE_GAUSSIAN,
        description="Distribution family (see tailstats.core.series)",
    )
    loc: float = 0.0
    scale: float = Field(1.0, gt=0)

    def spec(self) -> DistributionSpec:
        return DistributionSpec(kind=self.distribution, loc=self.loc, scale=self.scale)


class TransformConfig(BaseModel):
    lambda_bounds: Tuple[float, float] = Field(
        (-5.0, 5.0), description="Search range for the Box-Cox lambda"
    )
    lambda_tolerance: float = Field(
        1e-4, gt=0, description="|lambda| below this uses ln(x) instead of the power form"
    )

    @field_validator("lambda_bounds")
    @classmethod
    def _ordered(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        if not v[0] < v[1]:
            raise ValueError(f"lambda_bounds must be increasing, got {v}")
        return v


class ConvergenceConfig(BaseModel):
    mean_tolerance: float = Field(1.0, gt=0, description="Half vs full sample mean tolerance")
    median_tolerance: float = Field(0.5, gt=0, description="Half vs full sample median tolerance")


class RuntimeConfig(BaseModel):
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    transform: TransformConfig = Field(default_factory=TransformConfig)
    convergence: ConvergenceConfig = Field(default_factory=ConvergenceConfig)


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"
    OUTPUT_DIR: Optional[str] = None


class AppConfig(BaseModel):
    env: EnvSettings
    runtime: RuntimeConfig

    @field_validator("env", mode="before")
    @classmethod
    def _coerce_env(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, dict):
            return EnvSettings(**v)
        return v

    @staticmethod
    def load(config_path: Optional[Path] = None) -> "AppConfig":
        env = EnvSettings()  # loads from environment and .env

        runtime = RuntimeConfig()
        if config_path is None:
            default_path = Path("config.yaml")
            config_path = default_path if default_path.exists() else None

        if config_path and Path(config_path).exists():
            with open(config_path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
            try:
                runtime = RuntimeConfig(**raw)
            except ValidationError as ve:
                raise ValueError(f"Invalid config.yaml: {ve}")

        return AppConfig(env=env, runtime=runtime)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load merged configuration from environment and optional YAML."""

    return AppConfig.load(config_path)
