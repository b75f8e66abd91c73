"""Shared test fixtures for the adhoc_flight test suite."""

from __future__ import annotations

import pyarrow as pa
import pytest


@pytest.fixture
def results_table() -> pa.Table:
    return pa.table({"id": [1, 2, 3], "name": ["a", "b", "c"]})


@pytest.fixture
def results_batch(results_table: pa.Table) -> pa.RecordBatch:
    return pa.RecordBatch.from_arrays(
        [column.combine_chunks() for column in results_table.columns],
        schema=results_table.schema,
    )
