"""Pydantic models describing dispatcher state."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HookStats(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    tag: str
    registered: bool = False
    priorities: list[int] = Field(default_factory=list)
    callback_count: int = Field(default=0, ge=0)
    runs: int = Field(default=0, ge=0)
    active: bool = False
