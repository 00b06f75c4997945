"""Pydantic data models for antisync."""

from antisync.models.config import Config, TargetConfig

__all__ = ["Config", "TargetConfig"]
