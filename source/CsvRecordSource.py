# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: CsvRecordSource
# -----------------------------------------------------------------------------
from __future__ import annotations

import csv
import time
from pathlib import Path
from typing import List

from errors.PipelineErrors import MalformedInputError, MissingFieldError
from source.RecordSource import Record, RecordSource


class CsvRecordSource(RecordSource):
    """
    Delimited file with a header row. Rows are buffered in full because
    normalisation needs whole-column min/max before anything is rewritten.
    """

    file_type = "csv"

    def load(self, path: str | Path) -> List[Record]:
        path = Path(path)
        start_time = time.time()
        records: List[Record] = []

        try:
            # utf-8-sig strips a leading BOM from Excel exports
            with path.open("r", encoding="utf-8-sig", newline="") as fh:
                reader = csv.DictReader(fh)
                if not reader.fieldnames:
                    raise MalformedInputError(f"CSV file '{path}' has no header row")
                if self.content_field not in reader.fieldnames:
                    raise MissingFieldError(self.content_field, where=f"CSV header of '{path}'")

                for row in reader:
                    # DictReader puts extra cells under None and fills short rows with None
                    if None in row or any(v is None for v in row.values()):
                        raise MalformedInputError(
                            f"CSV row {reader.line_num} in '{path}' does not match the header "
                            f"({len(reader.fieldnames)} column(s))"
                        )
                    records.append(dict(row))
        except csv.Error as e:
            raise MalformedInputError(f"Could not parse CSV file '{path}': {e}") from e
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"CSV file '{path}' is not valid UTF-8: {e}") from e
        except OSError as e:
            raise MalformedInputError(f"Could not read CSV file '{path}': {e}") from e

        elapsed = (time.time() - start_time) * 1000.0
        self.logger.info("Loaded %d record(s) from CSV '%s' (%.1f ms)", len(records), path, elapsed)
        return records
