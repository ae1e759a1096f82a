"""Architecture guard checks for the GUI/core boundary."""

from __future__ import annotations

import ast
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BoundaryRule:
    """Define import prefixes a package directory must never use."""

    forbidden_prefixes: frozenset[str]


DEFAULT_RULES: dict[str, BoundaryRule] = {
    "mdreader_py/core": BoundaryRule(
        forbidden_prefixes=frozenset({"PySide6", "mdreader_py.gui"}),
    )
}


def _resolve_relative(package: str, module: str | None, level: int) -> str:
    parts = package.split(".") if package else []
    if level > 1:
        parts = parts[: len(parts) - (level - 1)]
    if module:
        parts.append(module)
    return ".".join(parts)


def collect_imports(source: str, package: str = "") -> set[str]:
    """Collect absolute module names imported by ``source``.

    Relative imports are resolved against ``package``.
    """
    tree = ast.parse(source)
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
            continue
        if isinstance(node, ast.ImportFrom):
            if node.level:
                modules.add(_resolve_relative(package, node.module, node.level))
            elif node.module:
                modules.add(node.module)
    return modules


def _matches(module: str, prefixes: Iterable[str]) -> bool:
    return any(module == p or module.startswith(p + ".") for p in prefixes)


def check_file(path: Path, package: str, rule: BoundaryRule) -> list[str]:
    """Validate one file against its boundary rule."""
    source = path.read_text(encoding="utf-8")
    try:
        modules = collect_imports(source, package)
    except SyntaxError as exc:
        return [f"{path}: cannot parse imports ({exc.msg})."]
    disallowed = sorted(m for m in modules if _matches(m, rule.forbidden_prefixes))
    if disallowed:
        return [f"{path}: disallowed imports: {', '.join(disallowed)}"]
    return []


def check_rules(
    root: Path, rules: Mapping[str, BoundaryRule] | None = None
) -> list[str]:
    """Run architecture rules for every module under each guarded directory."""
    active_rules = rules or DEFAULT_RULES
    violations: list[str] = []
    for rel_dir, rule in active_rules.items():
        base = root / rel_dir
        if not base.is_dir():
            violations.append(f"{base}: missing directory for architecture guard check.")
            continue
        package = rel_dir.strip("/").replace("/", ".")
        for path in sorted(base.rglob("*.py")):
            rel_parent = path.parent.relative_to(base)
            sub = ".".join(rel_parent.parts)
            violations.extend(
                check_file(path, f"{package}.{sub}" if sub else package, rule)
            )
    return violations
