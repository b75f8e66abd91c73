"""Arrow IPC serialization helpers for query results."""

from __future__ import annotations

import logging
import os
from typing import BinaryIO

import pyarrow as pa

logger = logging.getLogger(__name__)

ResultBatch = pa.RecordBatch | pa.Table
FileTarget = str | os.PathLike | BinaryIO


def as_record_batch(batch: ResultBatch) -> pa.RecordBatch:
    """Return the results as exactly one RecordBatch.

    Tables are flattened column by column so a multi-chunk result still
    becomes a single batch. Schema metadata is kept.
    """
    if isinstance(batch, pa.RecordBatch):
        return batch
    if isinstance(batch, pa.Table):
        arrays = [column.combine_chunks() for column in batch.columns]
        return pa.RecordBatch.from_arrays(arrays, schema=batch.schema)
    raise TypeError(
        f"Expected a pyarrow RecordBatch or Table, got {type(batch).__name__}"
    )


def _is_path(target: object) -> bool:
    return isinstance(target, (str, os.PathLike))


def _write_stream(sink: BinaryIO | pa.NativeFile, batch: pa.RecordBatch) -> None:
    # Schema message on open, one batch, end-of-stream marker on close.
    with pa.ipc.new_stream(sink, batch.schema) as writer:
        writer.write_batch(batch)


def write_to_binary_file(batch: ResultBatch, target: FileTarget) -> None:
    """Write the results to ``target`` as a single Arrow IPC stream.

    ``target`` is either a filesystem path, which is created or truncated,
    or an open binary file object. A file object is flushed but left open
    for its owner to close.

    Raises OSError if the file cannot be created, opened or written. The
    error is not retried; a file that failed mid-write is left as is and
    is not a valid stream.
    """
    record_batch = as_record_batch(batch)

    if _is_path(target):
        with open(target, "wb") as f:
            write_to_binary_file(record_batch, f)
        logger.debug("Wrote %d rows to %s", record_batch.num_rows, os.fspath(target))
        return

    _write_stream(target, record_batch)
    target.flush()


def batch_to_ipc(batch: ResultBatch) -> bytes:
    """Serialize the results to Arrow IPC stream bytes."""
    record_batch = as_record_batch(batch)
    sink = pa.BufferOutputStream()
    _write_stream(sink, record_batch)
    return sink.getvalue().to_pybytes()


def read_from_binary_file(source: FileTarget) -> pa.Table:
    """Read a file written by :func:`write_to_binary_file` back into a Table.

    Raises OSError if the file cannot be read and pyarrow.ArrowInvalid if
    it does not hold an Arrow IPC stream.
    """
    if _is_path(source):
        with open(source, "rb") as f:
            return read_from_binary_file(f)

    table = pa.ipc.open_stream(source).read_all()
    logger.debug("Read %d rows (%s)", table.num_rows, schema_summary(table.schema))
    return table


def _format_cell(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def content_to_tsv(batch: ResultBatch) -> str:
    """Render the results as tab-separated text with a header of field names."""
    record_batch = as_record_batch(batch)
    lines = ["\t".join(record_batch.schema.names)]
    columns = [column.to_pylist() for column in record_batch.columns]
    for row in zip(*columns):
        lines.append("\t".join(_format_cell(value) for value in row))
    return "".join(line + "\n" for line in lines)


def schema_summary(schema: pa.Schema) -> str:
    """Describe a schema as comma-separated ``name: type`` pairs."""
    if not schema.names:
        return "no columns"
    return ", ".join(f"{field.name}: {field.type}" for field in schema)
