"""Plain record for a dining commons menu item."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class MenuItem:
    dining_commons_code: str
    name: str
    station: str
    id: Optional[int] = None


__all__ = ["MenuItem"]
