from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Dict


def _parse_env_file(path: Path) -> Dict[str, str]:
    """Minimal .env parser (no external dependency required)."""
    data: dict[str, str] = {}
    if not path.exists():
        return data
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = value.strip().strip('"').strip("'")
    return data


def _parse_flag(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _parse_count(key: str, raw: str, *, minimum: int) -> int:
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer (got {raw!r})") from exc
    if value < minimum:
        raise ValueError(f"{key} must be >= {minimum} (got {value})")
    return value


@dataclass(frozen=True)
class NLFSettings:
    context_size: int
    training_marker: str
    line_width: int
    kwic_window: int
    case_sensitive: bool
    env_file: Path | None


def load_settings(env_path: str | Path = ".env") -> NLFSettings:
    """Load tool settings from .env (if present) + real environment."""
    env_file = Path(env_path)
    file_values = _parse_env_file(env_file)

    def read(key: str, default: str) -> str:
        return os.environ.get(key, file_values.get(key, default))

    context_size = _parse_count("NLF_CONTEXT_SIZE", read("NLF_CONTEXT_SIZE", "2"), minimum=0)
    training_marker = read("NLF_TRAINING_MARKER", "+")
    if not training_marker:
        raise ValueError("NLF_TRAINING_MARKER cannot be empty")
    line_width = _parse_count("NLF_LINE_WIDTH", read("NLF_LINE_WIDTH", "80"), minimum=1)
    kwic_window = _parse_count("NLF_KWIC_WINDOW", read("NLF_KWIC_WINDOW", "8"), minimum=0)
    case_sensitive = _parse_flag(read("NLF_CASE_SENSITIVE", "0"))

    env_file_used = env_file if env_file.exists() else None
    return NLFSettings(
        context_size=context_size,
        training_marker=training_marker,
        line_width=line_width,
        kwic_window=kwic_window,
        case_sensitive=case_sensitive,
        env_file=env_file_used,
    )
