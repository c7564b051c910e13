# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Error Classes for CI Configuration Checks.

Error Hierarchy:
    ConfigCheckError (base error)
    ├── TargetFileReadError -- target exists but cannot be read
    ├── YamlParseError -- text does not parse as YAML
    └── ChecklistConfigurationError -- invalid expectation or checklist manifest

All errors:
    - Support proper error chaining with ``raise ... from e``
    - Carry structured context (target path, operation, ...) for reporting

A missing target file is not an error: it is reported as a ``file_missing``
check result. Only failures that make a run meaningless are raised.
"""

from __future__ import annotations

from pathlib import Path


class ConfigCheckError(Exception):
    """Base error class for CI configuration checks.

    Example:
        >>> raise ConfigCheckError("Check run failed", operation="run")
    """

    def __init__(self, message: str, **context: object) -> None:
        """Initialize ConfigCheckError with structured context.

        Args:
            message: Human-readable error message
            **context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context: dict[str, object] = dict(context)

    def __str__(self) -> str:
        """Format the message followed by sorted context pairs."""
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v}" for k, v in sorted(self.context.items()))
        return f"{self.message} ({details})"


class TargetFileReadError(ConfigCheckError):
    """Raised when an existing target file cannot be read.

    Covers permission errors, directories at the target path and bytes that
    are not valid UTF-8. Aborts the whole run.

    Attributes:
        path: The target file that could not be read.
    """

    def __init__(self, message: str, *, path: Path, **context: object) -> None:
        self.path = path
        ctx = dict(context)
        ctx.setdefault("path", str(path))
        ctx.setdefault("operation", "read_target")
        super().__init__(message, **ctx)


class YamlParseError(ConfigCheckError):
    """Raised when text does not parse as YAML.

    The checker converts this into an ``invalid_structure`` result; it only
    escapes to callers of ``parse_yaml`` directly.
    """

    def __init__(self, message: str, **context: object) -> None:
        ctx = dict(context)
        ctx.setdefault("operation", "parse_yaml")
        super().__init__(message, **ctx)


class ChecklistConfigurationError(ConfigCheckError):
    """Raised when a checklist or one of its expectations is invalid.

    Used for empty substrings, uncompilable patterns, empty keyword lists and
    malformed checklist manifests.
    """

    def __init__(self, message: str, **context: object) -> None:
        ctx = dict(context)
        ctx.setdefault("operation", "load_checklist")
        super().__init__(message, **ctx)


__all__ = [
    "ChecklistConfigurationError",
    "ConfigCheckError",
    "TargetFileReadError",
    "YamlParseError",
]
