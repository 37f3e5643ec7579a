import shutil
import sys
from pathlib import Path


def default_lookup_tool() -> str:
    return "where" if sys.platform == "win32" else "which"


def resolve_cli(command: str) -> str | None:
    cmd_path = Path(command)
    if cmd_path.is_file():
        return str(cmd_path)

    found = shutil.which(command)
    if found:
        return found
    return None


def lookup_argv(command: str, lookup_tool: str | None = None) -> list[str] | None:
    """argv asking the host where `command` lives, or None when the lookup tool itself is missing."""
    tool = resolve_cli(lookup_tool or default_lookup_tool())
    if tool is None:
        return None
    return [tool, command]
