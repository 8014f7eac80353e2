from __future__ import annotations

from relkit.test.architecture._utils import (
    iter_source_files,
    matches_prefix,
    package_root,
    parse_imports,
    rel_name,
)

# Lower layers must not import the layers listed for them.
_FORBIDDEN = {
    "core": ("relkit.output", "relkit.platform", "relkit.services", "relkit.cli"),
    "output": ("relkit.platform", "relkit.services", "relkit.cli"),
    "platform": ("relkit.output", "relkit.services", "relkit.cli"),
    "services": ("relkit.cli",),
}


def test_layers_only_import_downwards() -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_source_files():
        layer = file_path.relative_to(root).parts[0]
        forbidden = _FORBIDDEN.get(layer, ())
        rel = rel_name(file_path)
        for item in parse_imports(file_path):
            if any(matches_prefix(item.module, prefix) for prefix in forbidden):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "Layering violations:\n" + "\n".join(offenders)
