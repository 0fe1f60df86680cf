"""Tests for config module."""

from __future__ import annotations

import os
from unittest.mock import patch

from portable_files.config import Config


class TestConfigConstants:
    """Tests for static configuration values."""

    def test_default_encoding(self) -> None:
        """Verifies text defaults to UTF-8.

        Business context:
        Every target must decode the same bytes to the same text unless
        the caller asks otherwise.

        Arrangement:
        None - tests static constant.

        Action:
        Access Config.DEFAULT_ENCODING.

        Assertion Strategy:
        Validates exact string value match.

        Testing Principle:
        Validates configuration constant value.
        """
        assert Config.DEFAULT_ENCODING == "utf-8"

    def test_recognized_separators(self) -> None:
        assert Config.RECOGNIZED_SEPARATORS == ("/", "\\")

    def test_overwrite_defaults_are_asymmetric(self) -> None:
        """Verifies writes overwrite by default while transfers do not.

        Business context:
        write_string replaces a file in place, which callers expect to
        succeed repeatedly; copy/move target a second location whose
        content must be protected unless explicitly allowed.

        Arrangement:
        None - tests static constants.

        Action:
        Read both overwrite defaults.

        Assertion Strategy:
        Validates True for writes and False for transfers.

        Testing Principle:
        Pins an intentional inconsistency.
        """
        assert Config.DEFAULT_WRITE_OVERWRITE is True
        assert Config.DEFAULT_TRANSFER_OVERWRITE is False
        assert Config.DEFAULT_TRANSFER_TRIM is True


class TestConfigTarget:
    """Tests for environment-driven target selection."""

    def test_default_target(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert Config.get_target() == "native"

    def test_env_var_sets_target(self) -> None:
        with patch.dict(os.environ, {"PORTABLE_FILES_TARGET": " Memory "}):
            assert Config.get_target() == "memory"

    def test_blank_env_var_falls_back(self) -> None:
        with patch.dict(os.environ, {"PORTABLE_FILES_TARGET": "   "}):
            assert Config.get_target() == "native"

    def test_override_beats_environment(self) -> None:
        with patch.dict(os.environ, {"PORTABLE_FILES_TARGET": "native"}):
            Config.set_test_overrides(target="memory")
            assert Config.get_target() == "memory"

    def test_reset_clears_override(self) -> None:
        Config.set_test_overrides(target="memory")
        Config.reset_test_overrides()
        with patch.dict(os.environ, {}, clear=True):
            assert Config.get_target() == "native"
