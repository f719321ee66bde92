"""Scroll / intersection domain models"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScrollSignals:
    """Derived chrome signals, never set directly by callers"""
    chrome_solid: bool = False
    scroll_top_visible: bool = False


@dataclass(frozen=True)
class IntersectionEntry:
    """One intersection observation for an observed region"""
    region_id: str
    is_intersecting: bool
