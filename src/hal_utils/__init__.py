"""Conversion, formatting and LED decision helpers for switch hardware management."""

from __future__ import annotations

__version__ = "0.1.0"
