import os
import yaml
from dataclasses import dataclass
from pathlib import Path

from wiex.errors import ConfigError

CONFIG_ENV = "WIEX_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


@dataclass
class AppConfig:
    path_env: str = "WIEX_PATH"
    lookup_tool: str | None = None
    strict: bool = False
    verbose: bool = False
    log_dir: str | None = None
    dotenv: bool = False
    dotenv_path: str = ".env"


def load_config(path: str | Path | None = None) -> AppConfig:
    if path is None:
        path = os.environ.get(CONFIG_ENV) or DEFAULT_CONFIG_PATH

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(code="config.unreadable", message=f"cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(code="config.invalid", message=f"invalid YAML in {path}: {e}") from e

    g = raw.get("global") if isinstance(raw, dict) else None
    if g is None:
        g = {}
    if not isinstance(g, dict):
        raise ConfigError(code="config.invalid", message=f"'global' must be a mapping in {path}")

    defaults = AppConfig()
    path_env = g.get("path_env") or defaults.path_env
    if not isinstance(path_env, str):
        raise ConfigError(code="config.invalid", message="global.path_env must be a string")

    return AppConfig(
        path_env=path_env,
        lookup_tool=g.get("lookup_tool") or None,
        strict=bool(g.get("strict", defaults.strict)),
        verbose=bool(g.get("verbose", defaults.verbose)),
        log_dir=g.get("log_dir") or None,
        dotenv=bool(g.get("dotenv", defaults.dotenv)),
        dotenv_path=str(g.get("dotenv_path") or defaults.dotenv_path),
    )
