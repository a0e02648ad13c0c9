"""Configuration loading: YAML file + overrides, validated with pydantic."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from priority_balancer.core.balancer import LoadBalancer
from priority_balancer.core.random_source import (
    RandomSource,
    deterministic_random_source,
    fast_random_source,
    system_random_source,
)
from priority_balancer.core.resource import UINT64_MAX, Resource

logger = logging.getLogger(__name__)


class ResourceConfig(BaseModel):
    priority: int = Field(default=0, ge=0, le=UINT64_MAX)
    weight: int = Field(default=0, ge=0, le=UINT64_MAX)
    target: Any = None

    def to_resource(self) -> Resource[Any]:
        return Resource(priority=self.priority, weight=self.weight, target=self.target)


class RandomConfig(BaseModel):
    source: Literal["fast", "system", "deterministic"] = "fast"
    seed: int | None = None

    @model_validator(mode="after")
    def seed_for_deterministic(self) -> "RandomConfig":
        if self.source == "deterministic" and self.seed is None:
            raise ValueError("random.seed is required when source is 'deterministic'")
        return self


class BalancerConfig(BaseModel):
    resources: list[ResourceConfig] = Field(default_factory=list)
    random: RandomConfig = RandomConfig()


def load_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> BalancerConfig:
    """Load config from YAML file, then apply overrides."""
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        else:
            logger.warning("Config file %s not found, using defaults", path)

    if overrides:
        _deep_merge(data, overrides)

    return BalancerConfig(**data)


def make_random_source(config: RandomConfig) -> RandomSource:
    if config.source == "system":
        return system_random_source()
    if config.source == "deterministic":
        if config.seed is None:
            raise ValueError("random.seed is required when source is 'deterministic'")
        return deterministic_random_source(config.seed)
    return fast_random_source()


def build_from_config(config: BalancerConfig) -> LoadBalancer[Any]:
    """Build a balancer from validated config.

    Raises ``EmptyInputError`` when the config lists no resources.
    """
    resources = [r.to_resource() for r in config.resources]
    return LoadBalancer(resources, make_random_source(config.random))


def _deep_merge(base: dict, override: dict) -> None:
    """Merge override dict into base dict recursively (in-place)."""
    for key, value in override.items():
        if value is None:
            continue
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
