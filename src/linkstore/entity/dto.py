"""Data Transfer Objects (dataclass DTOs) for keyword infos and plugin pages."""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

# ── Keyword ──

@dataclass
class KeywordInfo:
    keyword: str
    url: str
    title: Optional[str] = None
    timestamp: Optional[datetime] = None
    ip: str = ""
    clicks: int = 0

# ── Plugin pages ──

@dataclass(frozen=True)
class PluginPage:
    slug: str
    title: str
    function: Callable
