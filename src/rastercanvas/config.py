"""Runtime configuration helpers.

Merges the persisted :class:`~rastercanvas.settings.schema.Settings` with
optional CLI overrides into a :class:`RuntimeConfig`. CLI values win for the
current invocation only; nothing is written back to disk.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .render.netpbm import PbmPolarity
from .settings.schema import Settings
from .settings.store import SettingsStore


@dataclass(slots=True)
class RuntimeConfig:
    output_dir: Path
    pbm_polarity: PbmPolarity
    log_level: int
    demo_size: int


def make_runtime_config(*, args: Optional[object] = None) -> RuntimeConfig:
    """Build a RuntimeConfig from persisted settings and *args*.

    *args* is argparse.Namespace-like; attributes that are missing or None
    leave the persisted value in place.
    """
    settings = SettingsStore.load()
    output_dir = settings.output_dir
    polarity = PbmPolarity(settings.pbm_polarity)
    level_name = settings.log_level
    size = settings.demo_size

    if args is not None:
        a_out = getattr(args, "output_dir", None)
        if a_out is not None:
            output_dir = str(a_out)
        a_invert = getattr(args, "invert_pbm", None)
        if a_invert is not None:
            polarity = PbmPolarity.ON_IS_ZERO if a_invert else PbmPolarity.ON_IS_ONE
        a_level = getattr(args, "log_level", None)
        if a_level is not None:
            level_name = str(a_level).upper()
        a_size = getattr(args, "size", None)
        if a_size is not None:
            size = int(a_size)

    if size <= 0:
        raise ValueError(f"demo size must be > 0, got {size}")
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {level_name!r}")

    return RuntimeConfig(
        output_dir=Path(output_dir).expanduser(),
        pbm_polarity=polarity,
        log_level=level,
        demo_size=size,
    )


def save_as_defaults(cfg: RuntimeConfig) -> Settings:
    """Persist *cfg* so later runs start from it; returns what was written."""
    settings = Settings(
        output_dir=str(cfg.output_dir),
        pbm_polarity=cfg.pbm_polarity.value,
        log_level=logging.getLevelName(cfg.log_level),
        demo_size=cfg.demo_size,
    )
    SettingsStore.save(settings)
    return settings
