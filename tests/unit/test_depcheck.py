from __future__ import annotations

import subprocess
import sys
from pathlib import Path

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "tools" / "depcheck.py"


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, str(SCRIPT_PATH), *args],
        capture_output=True,
        text=True,
        check=False,
    )


def test_depcheck_fails_on_forbidden_import(tmp_path: Path) -> None:
    domain_dir = tmp_path / "domain"
    domain_dir.mkdir(parents=True, exist_ok=True)

    violating_file = domain_dir / "money.py"
    violating_file.write_text("from opentelemetry import trace\n", encoding="utf-8")

    result = _run("--path", str(domain_dir))

    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode != 0
    assert "opentelemetry" in combined_output
    assert str(violating_file) in combined_output


def test_depcheck_flags_outer_layer_imports(tmp_path: Path) -> None:
    violating_file = tmp_path / "quote.py"
    violating_file.write_text(
        "import checkout.application.use_cases.money_operations\n", encoding="utf-8"
    )

    result = _run("--path", str(violating_file))

    assert result.returncode == 1
    assert "checkout.application.use_cases.money_operations" in result.stdout


def test_depcheck_ignores_relative_imports(tmp_path: Path) -> None:
    (tmp_path / "quote.py").write_text("from .money import MoneyValue\n", encoding="utf-8")

    result = _run("--path", str(tmp_path))

    assert result.returncode == 0


def test_depcheck_passes_on_money_domain() -> None:
    result = _run()

    assert result.returncode == 0
    assert "depcheck passed" in result.stdout
