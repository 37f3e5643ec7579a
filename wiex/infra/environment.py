import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import dotenv

PATH_VARIABLE = "PATH"


@dataclass(frozen=True)
class EnvironmentContext:
    search_path_extra: str | None
    inherited_path: str | None
    full_environment: Mapping[str, str]

    def child_environment(self) -> dict[str, str]:
        # joined even when the extra part is missing, no dedup or validation
        env = dict(self.full_environment)
        env[PATH_VARIABLE] = f"{self.inherited_path or ''}{os.pathsep}{self.search_path_extra or ''}"
        return env


def read_dotenv(dotenv_path: str | Path) -> dict[str, str]:
    """Values from a .env file, without touching os.environ."""
    if not Path(dotenv_path).is_file():
        return {}
    return {k: v for k, v in dotenv.dotenv_values(dotenv_path).items() if v is not None}


def derive_environment(
    path_env: str = "WIEX_PATH",
    environ: Mapping[str, str] | None = None,
    dotenv_path: str | Path | None = None,
) -> EnvironmentContext:
    if environ is None:
        environ = os.environ

    full = dict(environ)
    search_path_extra = full.get(path_env)
    # only the augmentation variable is taken from .env, the child env stays the host's
    if search_path_extra is None and dotenv_path:
        search_path_extra = read_dotenv(dotenv_path).get(path_env)

    return EnvironmentContext(
        search_path_extra=search_path_extra,
        inherited_path=full.get(PATH_VARIABLE),
        full_environment=full,
    )
