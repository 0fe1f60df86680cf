"""Main test module for portable-files."""

import portable_files


class TestVersion:
    """Test version information."""

    def test_version_exists(self) -> None:
        """Verifies that version string is defined in package.

        Business context:
        Version information is required for package distribution,
        dependency management, and user troubleshooting.

        Arrangement:
        None - tests package-level attribute.

        Action:
        Access __version__ attribute.

        Assertion Strategy:
        Validates version is not None.

        Testing Principle:
        Validates package metadata completeness.
        """
        assert portable_files.__version__ is not None

    def test_version_format(self) -> None:
        version = portable_files.__version__
        parts = version.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    def test_title_exists(self) -> None:
        assert portable_files.__title__ == "portable_files"

    def test_metadata_credits_project(self) -> None:
        assert portable_files.__author__ == "portable-files contributors"
        assert not hasattr(portable_files, "__url__")


class TestPublicApi:
    """The package root re-exports the public surface."""

    def test_exports_resolve(self) -> None:
        for name in portable_files.__all__:
            assert hasattr(portable_files, name), name

    def test_file_handle_exported(self) -> None:
        from portable_files.handle import FileHandle

        assert portable_files.FileHandle is FileHandle
