"""
Smoke tests to verify all critical dependencies are installed correctly.

These tests confirm that:
1. Python 3.11+ is installed
2. All core dependencies are importable
3. Project version is accessible
"""

import sys


class TestPythonVersion:
    """Verify Python version requirements."""

    def test_python_311_or_higher(self) -> None:
        assert sys.version_info >= (3, 11), (
            f"Python 3.11+ required, "
            f"got {sys.version_info.major}.{sys.version_info.minor}"
        )


class TestCoreDependencies:
    """Verify core library dependencies."""

    def test_pydantic_v2(self) -> None:
        """Pydantic v2 must be installed (transaction script models)."""
        import pydantic

        major_version = int(pydantic.VERSION.split(".")[0])
        assert major_version >= 2, f"Pydantic v2 required, got {pydantic.VERSION}"

    def test_structlog_import(self) -> None:
        import structlog

        assert structlog.get_logger() is not None


class TestProject:
    """Verify the project package itself."""

    def test_version(self, project_version: str) -> None:
        assert project_version == "0.1.0"

    def test_public_entry_points_import(self) -> None:
        from campaign_registry.bootstrap import create_campaign_registry
        from campaign_registry.domain.errors import RegistryErrorKind

        assert callable(create_campaign_registry)
        assert RegistryErrorKind.CAMPAIGN_EXISTS.code == 100
