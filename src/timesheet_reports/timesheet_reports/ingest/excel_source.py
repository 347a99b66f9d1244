from __future__ import annotations

import logging
import zipfile
from typing import IO, Any, Union
from pathlib import Path

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from ..core.exceptions import StructuralError

logger = logging.getLogger(__name__)

Source = Union[str, Path, IO[bytes]]


class ExcelRowSource:
    """Reads the first worksheet of a workbook as positional rows.

    Row 1 (the header) is returned too; callers decide what to skip.
    Empty cells come back as None.
    """

    def read_rows(self, source: Source) -> list[tuple[Any, ...]]:
        try:
            df = pd.read_excel(source, sheet_name=0, header=None, dtype=object, engine="openpyxl")
        except (ValueError, zipfile.BadZipFile, InvalidFileException) as e:
            raise StructuralError(f"Could not read workbook: {e}") from e

        if df.empty:
            raise StructuralError("No worksheet data found in Excel file")

        df = df.astype(object).where(pd.notna(df), None)
        rows = list(df.itertuples(index=False, name=None))
        logger.debug("Read %s rows from workbook", len(rows))
        return rows
