"""Shared fixtures: small college cost datasets written to tmp_path."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from collegecost.data.loader import load_directory
from collegecost.lookup import CostLookup

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from collegecost.data.directory import CollegeDirectory

HEADER = "College,Tuition (in-state),Tuition (out-of-state),Room & Board\n"

SAMPLE_ROWS = (
    "Test U,10000,20000,5000\n"
    "Decimal College,20000,31000,12000.5\n"
    '"Smith, Jones & Co. College",9999.994,15000,0.001\n'
    "Broken State,not-a-number,20000,4000\n"
    "No Board Tech,8000,16000,\n"
)


@pytest.fixture()
def make_csv(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes CSV text to tmp_path and returns the path."""

    def _make(content: str, name: str = "college_costs.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _make


@pytest.fixture()
def sample_csv(make_csv: Callable[..., Path]) -> Path:
    return make_csv(HEADER + SAMPLE_ROWS)


@pytest.fixture()
def sample_directory(sample_csv: Path) -> CollegeDirectory:
    return load_directory(sample_csv)


@pytest.fixture()
def sample_lookup(sample_directory: CollegeDirectory) -> CostLookup:
    return CostLookup(sample_directory)
