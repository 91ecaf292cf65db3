from __future__ import annotations

import argparse
import ast
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

# The money domain is pure arithmetic; tracing, metrics and payload
# mapping live in the outer layers.
FORBIDDEN_MODULES = frozenset(
    {
        "pydantic",
        "opentelemetry",
        "prometheus_client",
        "checkout.application",
        "checkout.infrastructure",
        "checkout.tools",
    }
)

DEFAULT_DOMAIN_PATH = Path(__file__).resolve().parents[1] / "src" / "checkout" / "domain"


@dataclass(frozen=True)
class Violation:
    file_path: Path
    line: int
    module: str

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line} -> {self.module}"


def is_forbidden(module: str, forbidden: Iterable[str] = FORBIDDEN_MODULES) -> bool:
    return any(module == name or module.startswith(f"{name}.") for name in forbidden)


class _ImportCollector(ast.NodeVisitor):
    def __init__(self, file_path: Path) -> None:
        self.file_path = file_path
        self.violations: list[Violation] = []

    def _check(self, module: str, line: int) -> None:
        if is_forbidden(module):
            self.violations.append(Violation(file_path=self.file_path, line=line, module=module))

    def visit_Import(self, node: ast.Import) -> None:
        for alias in node.names:
            self._check(alias.name, node.lineno)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        # relative imports stay inside the scanned package
        if node.level == 0 and node.module:
            self._check(node.module, node.lineno)


def _python_files(root: Path) -> Iterable[Path]:
    if root.is_file() and root.suffix == ".py":
        yield root
    elif root.is_dir():
        yield from sorted(root.rglob("*.py"))


def scan_file(file_path: Path) -> list[Violation]:
    tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
    collector = _ImportCollector(file_path)
    collector.visit(tree)
    return collector.violations


def find_violations(paths: Sequence[Path]) -> list[Violation]:
    return [
        violation
        for path in paths
        for file_path in _python_files(path)
        for violation in scan_file(file_path)
    ]


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Import policy check for the checkout money domain."
    )
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        help="Path to scan (repeatable). Defaults to src/checkout/domain.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    scan_paths = [Path(item) for item in args.path] if args.path else [DEFAULT_DOMAIN_PATH]

    violations = find_violations(scan_paths)
    if not violations:
        print("depcheck passed")
        return 0

    print(f"depcheck failed: {len(violations)} forbidden import(s) detected")
    for violation in violations:
        print(violation)
    return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
