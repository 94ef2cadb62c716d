from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from overlap_core.io.schemas import HEADER_TOKEN


@dataclass(frozen=True)
class RuntimeConfig:
    export_root: Path
    header_token: str
    log_level: str


def load_env(dotenv_path: str | Path | None = None) -> None:
    path = Path(dotenv_path) if dotenv_path else None
    if path and path.exists():
        load_dotenv(path)
        return
    load_dotenv()


def runtime_config() -> RuntimeConfig:
    export_root = Path(os.getenv("PAIR_FINDER_EXPORT_DIR", "./exports")).expanduser().resolve()
    header_token = os.getenv("PAIR_FINDER_HEADER_TOKEN", "").strip() or HEADER_TOKEN
    log_level = os.getenv("PAIR_FINDER_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    return RuntimeConfig(export_root=export_root, header_token=header_token, log_level=log_level)


def ensure_export_root(cfg: RuntimeConfig) -> Path:
    cfg.export_root.mkdir(parents=True, exist_ok=True)
    return cfg.export_root


def configure_logging(cfg: RuntimeConfig) -> None:
    level = logging.getLevelName(cfg.log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level in PAIR_FINDER_LOG_LEVEL: {cfg.log_level!r}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
