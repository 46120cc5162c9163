"""Shared test fixtures for Branchmap tests."""

import textwrap

import pytest


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path_factory):
    """Keep user-level config files and BRANCHMAP_* variables out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("BRANCHMAP_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HOME", str(tmp_path_factory.mktemp("home")))


@pytest.fixture
def write_file():
    """Write dedented text under a root directory and return the path."""

    def _write(root, rel_path, content=""):
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


RUST_SAMPLE = """\
fn process(items: &[Item]) -> Result<(), Error> {
    if items.is_empty() {
        return Ok(());
    }
    for item in items {
        if item.created > "2025-01-01" {
            if item.value > 42 {
                log(item);
            }
        } else if item.legacy {
            if item.version < "1.0" {
                migrate(item);
            }
        }
    }
    if fs::metadata("x").is_ok() && ready {
        cleanup();
    }
    Ok(())
}
"""


@pytest.fixture
def rust_sample():
    """Rust function with nested, dated, versioned and impure branches."""
    return RUST_SAMPLE
