"""Shared helpers."""

from __future__ import annotations

from modulefield.utils.merge import deep_merge

__all__ = ["deep_merge"]
