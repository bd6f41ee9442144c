"""Configuration data structures."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class UpdateSetting:
    """Which fields of an object are watched for updates.

    ``fields`` is evaluated in order; the first selector whose value changed
    is the one reported.  ``include_diff`` tells callers whether the diff
    text should be shown to users; the engine computes it either way.
    """

    fields: tuple[str, ...] = ()
    include_diff: bool = True

    def __post_init__(self) -> None:
        # A bare string would otherwise be split into one selector per character
        if isinstance(self.fields, str | bytes):
            raise TypeError(f"UpdateSetting fields must be a sequence of selectors, got: {self.fields!r}")
        # Accept any iterable of selectors but store an immutable tuple
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> UpdateSetting:
        """Build from the configuration shape ``{"fields": [...], "includeDiff": true}``."""
        raw_fields = data.get("fields") or ()
        if isinstance(raw_fields, str) or not isinstance(raw_fields, Iterable):
            raise ValueError(f"UpdateSetting fields must be a list of selectors, got: {raw_fields!r}")
        selectors = tuple(str(f) for f in raw_fields)

        include_diff = data.get("includeDiff", data.get("include_diff", True))
        if not isinstance(include_diff, bool):
            raise ValueError(f"UpdateSetting includeDiff must be a boolean, got: {include_diff!r}")
        return cls(fields=selectors, include_diff=include_diff)


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"


@dataclass
class KubeDiffConfig:
    """Top-level kubediff configuration."""

    selector_cache_size: int = 256
    log: LogConfig = field(default_factory=LogConfig)
