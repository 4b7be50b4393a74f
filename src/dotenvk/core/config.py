from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from dotenvk.core.errors import ConfigError
from dotenvk.core.models import ExportConfig, FileConfig, PasswordOptions

# Python 3.11+ has tomllib; for 3.9/3.10 use tomli
try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

log = logging.getLogger(__name__)

# Project-local config (next to the .env files it applies to)
DEFAULT_REPO_CONFIG_FILES = (".dotenvk/config.toml",)

# Global config (applies on this machine)
DEFAULT_GLOBAL_CONFIG_FILES = (
    "~/.config/dotenvk/config.toml",
    "~/.dotenvk/config.toml",
)

M = TypeVar("M", bound=BaseModel)


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8", errors="replace"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(path, str(e)) from e
    if not isinstance(data, dict):
        return {}
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge override into base (dict-only). Lists/scalars are replaced.
    """
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def _expand_paths(paths: tuple[str, ...]) -> list[Path]:
    return [Path(p).expanduser().resolve() for p in paths]


def find_repo_config(start_dir: Path) -> Optional[Path]:
    """
    Walk upward to find a project-local config (works even without git).
    Finds the closest config in parent chain.
    """
    cur = start_dir.resolve()
    for parent in [cur, *cur.parents]:
        for rel in DEFAULT_REPO_CONFIG_FILES:
            p = (parent / rel).resolve()
            if p.exists() and p.is_file():
                return p
    return None


def find_global_config() -> Optional[Path]:
    for p in _expand_paths(DEFAULT_GLOBAL_CONFIG_FILES):
        if p.exists() and p.is_file():
            return p
    return None


# (source, data) pairs, lowest precedence first; source None means CLI overrides
Layer = Tuple[Optional[Path], Dict[str, Any]]


def _blame(layers: Sequence[Layer], name: str, field: object) -> Optional[Path]:
    """Return the file that supplied `[name] field`, or None for CLI overrides."""
    for source, data in reversed(layers):
        section = data.get(name)
        if isinstance(section, dict) and field in section:
            return source
    return None


def _section(layers: Sequence[Layer], merged: Dict[str, Any], name: str, model: Type[M]) -> M:
    data = merged.get(name) or {}
    if not isinstance(data, dict):
        data = {}
    try:
        return model.model_validate(data)
    except ValidationError as e:
        err = e.errors()[0]
        field = err["loc"][0] if err["loc"] else None
        raise ConfigError(_blame(layers, name, field), f"[{name}] {err['msg']}") from e


@dataclass(frozen=True)
class LoadedConfig:
    files: FileConfig
    export: ExportConfig
    randomize: PasswordOptions
    global_path: Optional[Path]
    repo_path: Optional[Path]


def load_config(
    start_dir: Path,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> LoadedConfig:
    """
    Precedence (lowest -> highest):
      defaults (models) ->
      global config ->
      repo config (closest) ->
      cli_overrides
    """
    cli_overrides = cli_overrides or {}

    global_path = find_global_config()
    repo_path = find_repo_config(start_dir)

    layers: List[Layer] = []

    if global_path:
        log.debug("global config: %s", global_path)
        layers.append((global_path, _read_toml(global_path)))

    if repo_path:
        log.debug("repo config: %s", repo_path)
        layers.append((repo_path, _read_toml(repo_path)))

    # CLI overrides are expected to be in the same shape as TOML (namespaced)
    layers.append((None, cli_overrides))

    merged: Dict[str, Any] = {}
    for _source, data in layers:
        merged = _deep_merge(merged, data)

    return LoadedConfig(
        files=_section(layers, merged, "dotenvk", FileConfig),
        export=_section(layers, merged, "export", ExportConfig),
        randomize=_section(layers, merged, "randomize", PasswordOptions),
        global_path=global_path,
        repo_path=repo_path,
    )
