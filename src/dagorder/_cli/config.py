"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Error in dagorder configuration."""


@dataclass(slots=True, frozen=True)
class DagorderConfig:
    """Configuration loaded from the ``[tool.dagorder]`` table of pyproject.toml.

    Relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    input: Path | None = None
    capacity: int = 0
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(pyproject_path: Path) -> DagorderConfig:
    """Load and validate [tool.dagorder] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed DagorderConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("dagorder", {})
    if not section:
        return DagorderConfig(project_root=project_root)

    input_path: Path | None = None
    if "input" in section:
        input_value = section["input"]
        if not isinstance(input_value, str):
            msg = "Invalid [tool.dagorder].input: expected string path"
            raise ConfigError(msg)
        input_path = Path(input_value)
        if not input_path.is_absolute():
            input_path = project_root / input_path

    capacity = section.get("capacity", 0)
    # bool is an int subclass, but `capacity = true` is a mistake
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
        msg = "Invalid [tool.dagorder].capacity: expected non-negative integer"
        raise ConfigError(msg)

    return DagorderConfig(input=input_path, capacity=capacity, project_root=project_root)


def get_config() -> DagorderConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        DagorderConfig (may be empty if no pyproject.toml or no [tool.dagorder] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return DagorderConfig()
    return load_config(pyproject_path)
