# parser/csv_reader.py
"""
Read a statement CSV into headers + row dicts.

pandas does the tokenizing and type inference; amounts may come back as
numbers or strings depending on the column, which the column mapper
tolerates. Blank lines are skipped and empty cells become None.
"""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, Dict, List, Union

import pandas as pd

LOGGER = logging.getLogger(__name__)

Row = Dict[str, Any]
Source = Union[str, Path, bytes, IO]


class StatementReadError(ValueError):
    """The uploaded file could not be read as CSV."""


@dataclass
class ParsedStatement:
    headers: List[str] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def empty(self) -> bool:
        return not self.rows


def _frame_to_rows(df: pd.DataFrame) -> List[Row]:
    obj = df.astype(object)
    return obj.where(pd.notna(obj), None).to_dict(orient="records")


def read_statement(source: Source) -> ParsedStatement:
    """Parse CSV from a path, raw bytes, or a file-like object (e.g. an upload)."""
    if isinstance(source, bytes):
        source = io.BytesIO(source)

    try:
        # index_col=False: rows with a trailing comma must stay keyed by header.
        # Only empty cells are missing; "N/A" or "NULL" are real descriptions.
        df = pd.read_csv(
            source,
            skip_blank_lines=True,
            index_col=False,
            keep_default_na=False,
            na_values=[""],
        )
    except pd.errors.EmptyDataError:
        LOGGER.info("Statement is empty")
        return ParsedStatement()
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise StatementReadError(f"Could not read CSV: {e}") from e

    # Rows where every cell is blank (e.g. ",,,") carry nothing to import.
    df = df.dropna(how="all")
    headers = [str(c) for c in df.columns]
    df.columns = headers
    rows = _frame_to_rows(df)
    LOGGER.debug("Read %d row(s) with columns %s", len(rows), headers)
    return ParsedStatement(headers=headers, rows=rows)
