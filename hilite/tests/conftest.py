"""Shared fixtures: sample sources and version-keyed golden outputs."""

from __future__ import annotations

from pathlib import Path

import pygments
import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLES_DIR = FIXTURES_DIR / "samples"
GOLDEN_ROOT = FIXTURES_DIR / "golden"


@pytest.fixture()
def read_sample():
    def read(name: str) -> str:
        return (SAMPLES_DIR / name).read_bytes().decode("utf-8")

    return read


@pytest.fixture()
def golden_root() -> Path:
    return GOLDEN_ROOT


@pytest.fixture()
def assert_golden(golden_root):
    """Compare output with the committed golden for the installed Pygments.

    ``actual`` must always equal ``reference`` (direct ``pygments.highlight``
    output). Goldens are grammar-version specific and read-only: a Pygments
    release without a committed golden directory skips the byte comparison,
    and a missing file inside a committed directory fails.
    """

    def check(name: str, actual: str, reference: str) -> None:
        assert actual == reference
        directory = golden_root / f"pygments-{pygments.__version__}"
        if not directory.is_dir():
            pytest.skip(f"no goldens committed for Pygments {pygments.__version__}")
        path = directory / name
        assert path.is_file(), f"missing golden file: {path}"
        assert actual.encode("utf-8") == path.read_bytes()

    return check
