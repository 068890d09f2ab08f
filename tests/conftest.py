"""Shared pytest fixtures for the create-gsp test suite.

Provides reusable fixtures for:
- A temporary working directory standing in for the user's cwd
- A temporary templates root with one small tree per registered template
- Recording Rich consoles so output can be asserted on
- A ready-made ``Config`` pointing at the temporary directories
"""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from create_gsp import utils
from create_gsp.config import Config
from create_gsp.scaffolder.catalog import TEMPLATE_REGISTRY


# ---------------------------------------------------------------------------
# Manifests
# ---------------------------------------------------------------------------

def make_manifest(**overrides: Any) -> dict[str, Any]:
    """A template ``package.json`` with a few fields the transformer must keep."""
    manifest: dict[str, Any] = {
        "name": "gsp-react-template",
        "private": True,
        "version": "0.0.0",
        "type": "module",
        "scripts": {"dev": "vite", "build": "vite build"},
        "dependencies": {"react": "^19.1.0", "react-dom": "^19.1.0"},
        "devDependencies": {"vite": "^6.3.5"},
        "browserslist": ["defaults"],
    }
    manifest.update(overrides)
    return manifest


def write_template(root: Path, identifier: str, manifest: dict[str, Any] | None = None) -> Path:
    """Create a small template tree named *identifier* under *root*."""
    tree = root / identifier
    (tree / "src" / "components").mkdir(parents=True, exist_ok=True)
    (tree / "public").mkdir(exist_ok=True)
    (tree / "package.json").write_text(
        json.dumps(manifest or make_manifest(), indent=2) + "\n", encoding="utf-8"
    )
    (tree / "index.html").write_text(f"<title>{identifier}</title>\n", encoding="utf-8")
    (tree / "src" / "main.jsx").write_text("console.log('main');\n", encoding="utf-8")
    (tree / "src" / "components" / "App.jsx").write_text(
        f"export default () => '{identifier}';\n", encoding="utf-8"
    )
    (tree / "public" / "logo.bin").write_bytes(bytes(range(256)))
    return tree


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """Temporary templates directory holding every registered identifier."""
    root = tmp_path / "templates"
    root.mkdir()
    for identifier in TEMPLATE_REGISTRY:
        write_template(root, identifier)
    return root


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Temporary directory used as the working directory of a run."""
    cwd = tmp_path / "workspace"
    cwd.mkdir()
    return cwd


@pytest.fixture
def config(templates_root: Path, workspace: Path) -> Config:
    """Non-interactive configuration rooted at the temporary directories."""
    return Config(templates_dir=templates_root, cwd=workspace, interactive=False)


def tree_snapshot(root: Path) -> dict[str, bytes]:
    """Map every file under *root* (relative path) to its bytes."""
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


# ---------------------------------------------------------------------------
# Console capture
# ---------------------------------------------------------------------------

@pytest.fixture
def captured_output(monkeypatch: pytest.MonkeyPatch) -> dict[str, io.StringIO]:
    """Redirect the shared Rich consoles into in-memory buffers."""
    out = io.StringIO()
    err = io.StringIO()
    out_console = Console(file=out, force_terminal=False, width=200, soft_wrap=True)
    err_console = Console(file=err, force_terminal=False, width=200, soft_wrap=True)
    monkeypatch.setattr(utils, "console", out_console)
    monkeypatch.setattr(utils, "error_console", err_console)
    monkeypatch.setattr("create_gsp.cli.error_console", err_console)
    return {"stdout": out, "stderr": err}


@pytest.fixture
def snapshot():
    """Callable returning ``{relative_path: bytes}`` for a directory tree."""
    return tree_snapshot


@pytest.fixture
def template_factory(templates_root: Path):
    """Callable that (re)writes one template tree under ``templates_root``."""

    def _factory(identifier: str, manifest: dict[str, Any] | None = None) -> Path:
        return write_template(templates_root, identifier, manifest)

    return _factory


@pytest.fixture
def sample_manifest() -> dict[str, Any]:
    return make_manifest()
