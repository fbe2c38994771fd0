"""Geometry of an application window."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class WindowGeometry:
    """The size of a window and whether it is maximized."""

    width: int = 0
    height: int = 0
    is_maximized: bool = False