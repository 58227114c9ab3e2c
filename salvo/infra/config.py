"""Agent configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from salvo.ai.placement import DEFAULT_PLACEMENT_ATTEMPTS
from salvo.core.models import BOARD_SIZE, MAX_BOARD_SIZE, MIN_SHIP_LENGTH

DEFAULT_FLEET: tuple[int, ...] = (5, 4, 3, 3, 2)


@dataclass(frozen=True, slots=True)
class AgentConfig:
    """Immutable agent configuration."""

    board_size: int = BOARD_SIZE
    max_board_size: int = MAX_BOARD_SIZE
    min_ship_length: int = MIN_SHIP_LENGTH
    placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    seed: int | None = None
    fleet: tuple[int, ...] = DEFAULT_FLEET


def load_agent_config() -> AgentConfig:
    """Load agent configuration from SALVO_* env vars."""
    return AgentConfig(
        board_size=_int("SALVO_BOARD_SIZE", BOARD_SIZE),
        max_board_size=_int("SALVO_MAX_BOARD_SIZE", MAX_BOARD_SIZE),
        min_ship_length=_int("SALVO_MIN_SHIP_LENGTH", MIN_SHIP_LENGTH),
        placement_attempts=max(1, _int("SALVO_PLACEMENT_ATTEMPTS", DEFAULT_PLACEMENT_ATTEMPTS)),
        seed=_optional_int("SALVO_SEED"),
        fleet=parse_fleet(os.getenv("SALVO_FLEET", "")) or DEFAULT_FLEET,
    )


def parse_fleet(raw: str) -> tuple[int, ...]:
    """Parse a comma-separated list of ship lengths, skipping malformed entries."""
    lengths: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            lengths.append(int(part))
        except ValueError:
            continue
    return tuple(lengths)


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load split env files with optional local overrides.

    Precedence is left-to-right because later loads may overwrite previous values.
    Default order:
    1) appdata/config/.env.arena
    2) appdata/config/.env.arena.local
    3) appdata/config/.env.salvo
    4) appdata/config/.env.salvo.local
    5) .env.arena
    6) .env.salvo
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env.arena",
            "appdata/config/.env.arena.local",
            "appdata/config/.env.salvo",
            "appdata/config/.env.salvo.local",
            ".env.arena",
            ".env.salvo",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate

    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[2]
    return project_root / path
