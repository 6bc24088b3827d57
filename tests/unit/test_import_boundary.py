"""Unit tests for the import boundary checking script.

Tests verify that the hexagonal architecture import rules are enforced:
- domain/ imports NOTHING from other package layers
- application/ imports from domain/ and config/
- infrastructure/ imports from domain/, application/ and config/
- bootstrap/ wires everything
"""

import ast
from pathlib import Path

import pytest

from scripts.check_imports import (
    ALLOWED_IMPORTS,
    LAYER_HIERARCHY,
    check_file_imports,
    check_import_boundaries,
    format_violations,
    get_import_module,
)

PACKAGE_DIR = Path(__file__).parent.parent.parent / "campaign_registry"


def _write(package_dir: Path, relative: str, source: str) -> Path:
    path = package_dir / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8")
    return path


class TestLayerHierarchy:
    def test_domain_is_innermost(self) -> None:
        assert LAYER_HIERARCHY["domain"] == 0

    def test_bootstrap_is_outermost(self) -> None:
        assert LAYER_HIERARCHY["bootstrap"] == max(LAYER_HIERARCHY.values())

    def test_domain_imports_nothing(self) -> None:
        assert ALLOWED_IMPORTS["domain"] == set()

    def test_application_imports_domain_and_config(self) -> None:
        assert ALLOWED_IMPORTS["application"] == {"domain", "config"}


class TestGetImportModule:
    def test_import_from_statement(self) -> None:
        node = ast.parse("from campaign_registry.domain.models import Campaign").body[0]
        assert isinstance(node, ast.ImportFrom)
        assert get_import_module(node) == "campaign_registry.domain.models"

    def test_import_statement(self) -> None:
        node = ast.parse("import campaign_registry.domain").body[0]
        assert isinstance(node, ast.Import)
        assert get_import_module(node) == "campaign_registry.domain"


class TestCheckFileImports:
    def test_domain_importing_application_is_violation(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "domain/models/bad.py",
            "from campaign_registry.application.ports import FeeLedger\n",
        )
        [(file_path, line_no, message)] = check_file_imports(path, tmp_path)
        assert file_path == str(path)
        assert line_no == 1
        assert message == "domain layer cannot import from application"

    def test_domain_may_not_import_observability(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "domain/bad.py",
            "from campaign_registry.infrastructure.observability import configure_structlog\n",
        )
        assert len(check_file_imports(path, tmp_path)) == 1

    def test_application_may_import_observability(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "application/services/ok.py",
            "from campaign_registry.infrastructure.observability import get_correlation_id\n",
        )
        assert check_file_imports(path, tmp_path) == []

    def test_application_may_not_import_stubs(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "application/services/bad.py",
            "from campaign_registry.infrastructure.stubs import InMemoryFeeLedger\n",
        )
        assert len(check_file_imports(path, tmp_path)) == 1

    def test_third_party_imports_ignored(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "domain/ok.py", "import structlog\nimport os\n")
        assert check_file_imports(path, tmp_path) == []

    def test_top_level_files_ignored(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path, "__init__.py", "from campaign_registry.bootstrap import x\n"
        )
        assert check_file_imports(path, tmp_path) == []


class TestPackageBoundaries:
    def test_package_has_no_violations(self) -> None:
        violations = check_import_boundaries(PACKAGE_DIR)
        assert violations == [], format_violations(violations)

    def test_missing_directory_reports_nothing(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert check_import_boundaries(tmp_path / "missing") == []
        assert "does not exist" in capsys.readouterr().err

    def test_format_violations(self) -> None:
        text = format_violations([("a.py", 3, "domain layer cannot import from config")])
        assert "a.py:3" in text
        assert "Total: 1 violation(s)" in text
        assert format_violations([]) == ""
