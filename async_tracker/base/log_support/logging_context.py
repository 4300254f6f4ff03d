"""Structured logging context object for lifecycle controllers.

This module defines :class:`LogContext`, a dataclass carrying the fields
shared by controller log events (controller name, invocation ticket and
generation, rerun flag, extra metadata). ``to_dict`` merges ``extra`` and
prunes ``None`` values for clean structured output.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for controller logging events."""

    controller: Optional[str] = None
    ticket: Optional[int] = None
    generation: Optional[int] = None
    is_rerun: Optional[bool] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
