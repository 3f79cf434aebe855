"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep env overrides and CLI logging setup from leaking between tests."""
    for name in (
        "PROXYOPTS_COMMAND_TIMEOUT",
        "PROXYOPTS_LOG_LEVEL",
        "PROXYOPTS_LOG_FILE",
        "PROXYOPTS_LOG_FILE_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    pkg = logging.getLogger("proxyopts")
    handlers, level, propagate = list(pkg.handlers), pkg.level, pkg.propagate
    yield
    for handler in list(pkg.handlers):
        if handler not in handlers:
            pkg.removeHandler(handler)
            handler.close()
    pkg.setLevel(level)
    pkg.propagate = propagate


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An npm project directory with no yarn markers."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "package.json").write_text('{"name": "demo"}\n')
    return root


@pytest.fixture
def yarn_project_dir(tmp_path: Path) -> Path:
    """A yarn workspace root with a nested package."""
    root = tmp_path / "monorepo"
    pkg = root / "packages" / "web"
    pkg.mkdir(parents=True)
    (root / ".yarnrc.yml").write_text("nodeLinker: node-modules\n")
    return pkg


@pytest.fixture(autouse=True)
def _package_managers_on_path(monkeypatch: pytest.MonkeyPatch):
    """Pretend npm and yarn are installed under /usr/bin."""
    monkeypatch.setattr(
        "proxyopts.adapters.languages.node.shutil.which",
        lambda name: f"/usr/bin/{name}",
    )
