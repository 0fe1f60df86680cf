"""
Configuration for portable-files.

PURPOSE: Centralized configuration constants and runtime settings.
AI CONTEXT: All configurable values live here - modify this file to change behavior.

CONFIGURATION CATEGORIES:
- Encoding: Text codec used when callers don't pass one
- Targets: Which FileSystem implementation backs new FileHandles
- Path rules: Separator conventions recognized regardless of host
- Operation defaults: overwrite/trim defaults per operation family

ENVIRONMENT VARIABLES:
- PORTABLE_FILES_TARGET: Deployment target name (default: "native")

USAGE:
    from portable_files.config import Config
    encoding = Config.DEFAULT_ENCODING
    target = Config.get_target()
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Config:
    """
    Immutable configuration container for portable-files.

    DESIGN: Frozen dataclass ensures configuration immutability at runtime.
    All values are class-level constants - no instance creation needed.

    OVERWRITE DEFAULTS:
    Writes replace in place and default to overwrite=True. Copy and move
    target a second location and default to overwrite=False. The two
    defaults are intentionally different and are exposed separately.
    """

    # =========================================================================
    # ENCODING
    # =========================================================================
    DEFAULT_ENCODING: ClassVar[str] = "utf-8"

    # =========================================================================
    # DEPLOYMENT TARGETS
    # =========================================================================
    DEFAULT_TARGET: ClassVar[str] = "native"
    TARGET_ENV_VAR: ClassVar[str] = "PORTABLE_FILES_TARGET"

    # =========================================================================
    # PATH RULES
    # =========================================================================
    RECOGNIZED_SEPARATORS: ClassVar[tuple[str, ...]] = ("/", "\\")
    """Unix and Windows separators, both honored on every host."""

    # =========================================================================
    # OPERATION DEFAULTS
    # =========================================================================
    DEFAULT_WRITE_OVERWRITE: ClassVar[bool] = True
    DEFAULT_TRANSFER_OVERWRITE: ClassVar[bool] = False
    DEFAULT_TRANSFER_TRIM: ClassVar[bool] = True

    # =========================================================================
    # ENVIRONMENT-BASED SETTINGS (runtime configurable)
    # =========================================================================
    _target_override: ClassVar[str | None] = None

    @classmethod
    def get_target(cls) -> str:
        """
        Get the deployment target used for new FileHandles.

        Uses a priority system: test overrides first, then the environment
        variable, then DEFAULT_TARGET. Blank environment values fall back
        to the default.

        Business context: The same application code runs on a host OS
        and inside sandboxes without a real filesystem. The target name
        picks which FileSystem implementation backs file operations.

        Args:
            None: Class method, accesses class variable and env var.

        Returns:
            Lowercased target name, e.g. 'native' or 'memory'.

        Raises:
            None: Environment lookup never raises.

        Example:
            >>> # With env var: PORTABLE_FILES_TARGET=memory
            >>> Config.get_target()
            'memory'
        """
        if cls._target_override is not None:
            return cls._target_override
        value = os.environ.get(cls.TARGET_ENV_VAR, "").strip().lower()
        return value or cls.DEFAULT_TARGET

    @classmethod
    def set_test_overrides(cls, target: str | None = None) -> None:
        """
        Set test overrides for environment-based settings.

        Must call reset_test_overrides() in test teardown to avoid
        affecting other tests.

        Args:
            target: Override for the deployment target. None to clear.

        Example:
            >>> Config.set_test_overrides(target='memory')
            >>> Config.get_target()
            'memory'
            >>> Config.reset_test_overrides()
        """
        cls._target_override = target

    @classmethod
    def reset_test_overrides(cls) -> None:
        """Reset all test overrides so settings come from the environment."""
        cls._target_override = None
