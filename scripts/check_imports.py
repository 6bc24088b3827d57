#!/usr/bin/env python3
"""Check hexagonal architecture import boundaries of campaign_registry.

Layering rules:
- domain/: Models, errors and validation rules, NO imports from other layers
- application/: Ports and services, may import from domain/
- infrastructure/: Adapters, may import from domain/ and application/
- bootstrap/: Wiring, may import from every layer

config/ holds plain settings and may be imported by application/ and
outer layers. Observability (structured logging, correlation IDs) is
cross-cutting: any layer except domain/ may import it.

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import sys
from pathlib import Path

PACKAGE = "campaign_registry"

# Lower number = more inner layer (more protected)
LAYER_HIERARCHY: dict[str, int] = {
    "domain": 0,
    "config": 1,
    "application": 2,
    "infrastructure": 3,
    "bootstrap": 4,
}

ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "config": set(),
    "application": {"domain", "config"},
    "infrastructure": {"domain", "application", "config"},
    "bootstrap": {"domain", "application", "infrastructure", "config"},
}

CROSS_CUTTING_MODULES: tuple[str, ...] = (
    f"{PACKAGE}.infrastructure.observability",
)


def get_import_module(node: ast.Import | ast.ImportFrom) -> str | None:
    """Extract the module name from an import statement."""
    if isinstance(node, ast.ImportFrom):
        return node.module
    if isinstance(node, ast.Import) and node.names:
        return node.names[0].name
    return None


def _get_file_layer(py_file: Path, package_dir: Path) -> str | None:
    """Return the layer a file belongs to, or None outside any layer."""
    try:
        relative = py_file.relative_to(package_dir)
    except ValueError:
        return None

    parts = relative.parts
    if len(parts) < 2:
        return None
    return parts[0] if parts[0] in LAYER_HIERARCHY else None


def _parse_file(py_file: Path) -> ast.Module | None:
    try:
        source = py_file.read_text(encoding="utf-8")
        return ast.parse(source, filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return None


def _check_import_violation(
    module: str, file_layer: str, allowed_layers: set[str]
) -> str | None:
    """Check if an import violates layer boundaries.

    Args:
        module: The imported module (e.g., "campaign_registry.domain.models")
        file_layer: The layer the importing file belongs to
        allowed_layers: Layers this file may import from

    Returns:
        Error message if violation detected, None otherwise
    """
    if not module.startswith(f"{PACKAGE}."):
        return None

    target_layer = module.split(".")[1]
    if target_layer not in LAYER_HIERARCHY or target_layer == file_layer:
        return None

    if file_layer != "domain" and module.startswith(CROSS_CUTTING_MODULES):
        return None

    if target_layer not in allowed_layers:
        return f"{file_layer} layer cannot import from {target_layer}"
    return None


def check_file_imports(
    py_file: Path, package_dir: Path
) -> list[tuple[str, int, str]]:
    """Check a single file for import boundary violations.

    Returns:
        List of (file_path, line_number, violation_message) tuples
    """
    file_layer = _get_file_layer(py_file, package_dir)
    if file_layer is None:
        return []

    tree = _parse_file(py_file)
    if tree is None:
        return []

    violations: list[tuple[str, int, str]] = []
    allowed_layers = ALLOWED_IMPORTS.get(file_layer, set())

    for node in ast.walk(tree):
        if isinstance(node, (ast.Import, ast.ImportFrom)):
            module = get_import_module(node)
            if module:
                error_msg = _check_import_violation(module, file_layer, allowed_layers)
                if error_msg:
                    violations.append((str(py_file), node.lineno, error_msg))

    return violations


def check_import_boundaries(package_dir: Path) -> list[tuple[str, int, str]]:
    """Check every Python file under the package directory."""
    violations: list[tuple[str, int, str]] = []

    if not package_dir.exists():
        print(f"Error: Package directory '{package_dir}' does not exist", file=sys.stderr)
        return violations

    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))

    return violations


def format_violations(violations: list[tuple[str, int, str]]) -> str:
    """Format violations for human-readable output."""
    if not violations:
        return ""

    lines = ["Import boundary violations found:", ""]
    for file_path, line_no, message in sorted(violations):
        lines.append(f"  {file_path}:{line_no}: {message}")
    lines.append("")
    lines.append(f"Total: {len(violations)} violation(s)")
    return "\n".join(lines)


def main() -> int:
    if len(sys.argv) > 1:
        package_dir = Path(sys.argv[1])
    else:
        package_dir = Path(__file__).parent.parent / PACKAGE

    violations = check_import_boundaries(package_dir)

    if violations:
        print(format_violations(violations))
        return 1
    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
