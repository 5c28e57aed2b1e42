"""Pydantic model for user settings."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

from ..render.netpbm import PbmPolarity

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Settings persisted to disk.

    Parameters
    ----------
    output_dir: Directory the CLI writes rendered images into.
    pbm_polarity: ``on_is_one`` writes foreground PBM pixels as ``1``;
        ``on_is_zero`` inverts the digits.
    log_level: Name of a standard :mod:`logging` level.
    demo_size: Edge length in pixels of the square CLI demo canvases.
    """

    output_dir: str = Field(default="test_outputs")
    pbm_polarity: str = Field(default=PbmPolarity.ON_IS_ONE.value)
    log_level: str = Field(default=logging.getLevelName(logging.WARNING))
    demo_size: int = Field(default=255)

    @field_validator("pbm_polarity")
    @classmethod
    def _chk_polarity(cls, v: str) -> str:
        allowed = [p.value for p in PbmPolarity]
        if v not in allowed:
            raise ValueError(
                "invalid pbm_polarity: must be one of " + ", ".join(allowed)
            )
        return v

    @field_validator("log_level")
    @classmethod
    def _chk_log_level(cls, v: str) -> str:
        v = str(v).upper()
        if v not in _LOG_LEVELS:
            raise ValueError(
                "invalid log_level: must be one of " + ", ".join(_LOG_LEVELS)
            )
        return v

    @field_validator("demo_size")
    @classmethod
    def _chk_demo_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("demo_size must be > 0")
        return v
