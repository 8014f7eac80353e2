from __future__ import annotations

import ast

from relkit.test.architecture._utils import iter_source_files, parse_imports, read_tree, rel_name


def _process_spawn_lines(tree: ast.AST) -> list[int]:
    lines: list[int] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call) or not isinstance(node.func, ast.Attribute):
            continue
        if node.func.attr in {"create_subprocess_exec", "create_subprocess_shell", "Popen"}:
            lines.append(node.lineno)
    return lines


def test_process_spawning_is_confined_to_platform_process() -> None:
    allowlist = {"platform/process.py"}

    offenders: list[str] = []
    for file_path in iter_source_files():
        rel = rel_name(file_path)
        if rel in allowlist:
            continue
        for item in parse_imports(file_path):
            if item.module == "subprocess":
                offenders.append(f"{rel}:{item.line}: imports subprocess")
        for line in _process_spawn_lines(read_tree(file_path)):
            offenders.append(f"{rel}:{line}: spawns a process outside the allowlist")

    assert not offenders, "Subprocess policy violations:\n" + "\n".join(offenders)
