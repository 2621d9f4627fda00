"""Configuration package exports."""

from .model import WireConfig

__all__ = ["WireConfig"]
