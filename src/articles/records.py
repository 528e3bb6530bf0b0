"""Plain record for an article recommended to students."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Article:
    title: str
    url: str
    explanation: str
    email: str
    date_added: datetime
    id: Optional[int] = None


__all__ = ["Article"]
