"""Plain record for a student organization keyed by its org code."""

from dataclasses import dataclass


@dataclass
class Organization:
    org_code: str
    org_translation: str
    org_translation_short: str
    inactive: bool = False


__all__ = ["Organization"]
