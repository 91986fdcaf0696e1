from __future__ import annotations

import ast
from pathlib import Path

ALLOWED_PATHS = ("src/rsearch/cli.py",)


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def test_no_print_calls_in_library() -> None:
    repo_root = _repo_root()
    violations: list[str] = []
    for path in (repo_root / "src" / "rsearch").rglob("*.py"):
        rel_path = path.relative_to(repo_root).as_posix()
        if rel_path in ALLOWED_PATHS:
            continue
        tree = ast.parse(path.read_text(encoding="utf-8-sig"))
        for node in ast.walk(tree):
            if isinstance(node, ast.Call) and isinstance(node.func, ast.Name) and node.func.id == "print":
                violations.append(f"{rel_path}:{node.lineno}")
    assert not violations, "print() is reserved for the CLI:\n" + "\n".join(sorted(violations))
