from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


TEMPLATE_FILES = {
    "src/bin/rust_cli_quickstart.rs": (
        "use rust_cli_quickstart::{error, RustCliQuickStartLog, RustCliQuickStartTool};\n"
        "\n"
        "struct RustCliQuickStartLogger;\n"
    ),
    "src/lib.rs": "pub struct RustCliQuickStartTool;\npub trait RustCliQuickStartLog {}\n",
    "benches/benchmarks.rs": (
        "use rust_cli_quickstart::RustCliQuickStartTool;\n"
        "criterion_group!(benches, RustCliQuickStartTool::bench);\n"
    ),
    "Cargo.toml": (
        "[package]\n"
        'name = "rust-cli-quickstart"\n'
        'description = "{{ description }}"\n'
        'authors = ["{{ firstName }} {{ lastName }} <{{ email }}>"]\n'
        'repository = "https://github.com/{{ alias }}/rust-cli-quickstart"\n'
        "\n"
        "[[bin]]\n"
        'name = "rust_cli_quickstart"\n'
        'path = "src/bin/rust_cli_quickstart.rs"\n'
    ),
    ".vscode/launch.json": '{"program": "${workspaceFolder}/target/debug/rust_cli_quickstart"}\n',
    "README.md": "# {{ projectName }}\n\n{{ description }}\n\nBy [{{ alias }}](https://github.com/{{ alias }}).\n",
}

ANSWERS = {
    "description": "Makes widgets",
    "firstName": "Jo",
    "lastName": "Doe",
    "email": "jo@example.com",
    "alias": "jdoe",
}


@pytest.fixture(autouse=True)
def reset_customizer_logger():
    """Undo handlers installed by the CLI so ``caplog`` sees every record."""

    yield
    logger = logging.getLogger("customizer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def template_tree(tmp_path: Path) -> Path:
    """A miniature checkout of the Rust quick start template."""

    root = tmp_path / "project"
    for relative_path, content in TEMPLATE_FILES.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture()
def answers() -> dict[str, str]:
    return dict(ANSWERS)


def _read_tree(root: Path) -> dict[str, str]:
    return {
        path.relative_to(root).as_posix(): path.read_text(encoding="utf-8")
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture()
def snapshot():
    """Return a function reading every file below a root keyed by relative path."""

    return _read_tree
