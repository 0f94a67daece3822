from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any
import tomllib

from .errors import ConfigError
from .logging import configure_logger


@dataclass
class Config:
    debug: bool = False
    rich: bool = True

    @staticmethod
    def from_dict(data: dict[str, Any]) -> Config:
        known = {f.name: f for f in fields(Config)}
        for key, value in data.items():
            if key not in known:
                raise ConfigError(
                    f"Unknown key `{key}` in `[tool.verdict]`, expected one of: "
                    f"{', '.join(known)}."
                )
            if not isinstance(value, bool):
                raise ConfigError(f"Expected a boolean for `{key}`, got: {value!r}")
        return Config(**data)


def read_config(path: Path = Path("pyproject.toml")) -> Config:
    """Read the `[tool.verdict]` section from a `pyproject.toml`. A missing
    file or section gives the default configuration."""
    if not path.exists():
        return Config()

    with open(path, "rb") as f_in:
        data = tomllib.load(f_in)
    for s in ["tool", "verdict"]:
        if not isinstance(data, dict):
            raise ConfigError(f"Expected `tool` to be a table in `{path}`, got: {data!r}")
        if s not in data:
            return Config()
        data = data[s]

    if not isinstance(data, dict):
        raise ConfigError(f"Expected `[tool.verdict]` to be a table in `{path}`.")
    return Config.from_dict(data)


def configure(config: Config) -> None:
    configure_logger(config.debug, config.rich)
