"""Layout configuration module.

Configuration is read from environment variables once and passed by value to
whatever builds a layout; nothing here is cached at module level.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass


_VARIANTS = ("legacy", "default")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def parse_extra_types(value: str) -> tuple[tuple[str, str], ...]:
    """Parse `type=ext,type=ext` into (type, extension) pairs.

    Raises:
        ValueError: If an entry is not of the form `type=ext`.
    """
    pairs: list[tuple[str, str]] = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        type_, sep, ext = entry.partition("=")
        type_, ext = type_.strip(), ext.strip()
        if not sep or not type_ or not ext:
            raise ValueError(f"Invalid type mapping '{entry}', expected type=extension")
        pairs.append((type_, ext))
    return tuple(pairs)


@dataclass(frozen=True)
class LayoutConfig:
    """Layout configuration container.

    Attributes:
        variant: Layout convention, either "legacy" or "default"
        extra_types: Additional (type, extension) pairs registered on top of the built-in table
        log_level: Logging level name used by the CLI
    """

    variant: str = "default"
    extra_types: tuple[tuple[str, str], ...] = ()
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "LayoutConfig":
        """Create configuration from environment variables.

        Environment variables:
            ARTIFACT_LAYOUT: "legacy" or "default" (default: "default")
            ARTIFACT_LAYOUT_EXTRA_TYPES: comma separated `type=ext` pairs (default: none)
            ARTIFACT_LAYOUT_LOG_LEVEL: logging level name (default: "WARNING")
        """
        return cls(
            variant=os.getenv("ARTIFACT_LAYOUT", "default").strip().lower(),
            extra_types=parse_extra_types(os.getenv("ARTIFACT_LAYOUT_EXTRA_TYPES", "")),
            log_level=os.getenv("ARTIFACT_LAYOUT_LOG_LEVEL", "WARNING").strip().upper(),
        )

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    def validate(self) -> None:
        """Validate the configuration.

        Raises:
            ValueError: If a setting is not supported.
        """
        if self.variant not in _VARIANTS:
            raise ValueError(f"Unsupported layout: {self.variant}")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {self.log_level}")
        for type_, ext in self.extra_types:
            if not type_ or not ext or "/" in ext:
                raise ValueError(f"Invalid type mapping {type_}={ext}")
