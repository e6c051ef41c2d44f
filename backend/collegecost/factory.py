"""Factory functions for creating pre-configured CostLookup instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from collegecost.data.loader import load_directory
from collegecost.lookup import CostLookup

if TYPE_CHECKING:
    from pathlib import Path


def create_lookup(dataset_path: str | Path) -> CostLookup:
    """Create a CostLookup over the dataset at *dataset_path*.

    The dataset is read completely before this returns, so the lookup
    never observes a partially loaded directory.

    Raises:
        DatasetLoadError: If the dataset cannot be read.
    """
    return CostLookup(load_directory(dataset_path))
