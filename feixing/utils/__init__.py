"""Utility helpers shared across feixing modules."""

from __future__ import annotations

from .angles import delta_angle, norm360
from .io import load_json_document

__all__ = ["delta_angle", "norm360", "load_json_document"]
