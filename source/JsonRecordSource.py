# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: JsonRecordSource
# -----------------------------------------------------------------------------
from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, List

from errors.PipelineErrors import MalformedInputError, MissingFieldError
from source.RecordSource import Record, RecordSource


class JsonRecordSource(RecordSource):
    """
    JSON document of the form {"<array_field>": [{...}, {...}]}.

    The file is parsed once, the shape is checked once on the parsed value,
    then the entries are copied out as records.
    """

    file_type = "json"

    def __init__(
            self,
            *,
            array_field: str = "data",
            content_field: str = "content",
            logger: logging.Logger | None = None,
    ):
        super().__init__(content_field=content_field, logger=logger)
        self.array_field = array_field

    def load(self, path: str | Path) -> List[Record]:
        path = Path(path)
        start_time = time.time()

        try:
            with path.open("r", encoding="utf-8") as fh:
                document = json.load(fh)
        except json.JSONDecodeError as e:
            raise MalformedInputError(f"Could not parse JSON file '{path}': {e}") from e
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"JSON file '{path}' is not valid UTF-8: {e}") from e
        except OSError as e:
            raise MalformedInputError(f"Could not read JSON file '{path}': {e}") from e

        records = self._extract_records(document, path)

        elapsed = (time.time() - start_time) * 1000.0
        self.logger.info(
            "Loaded %d record(s) from JSON '%s' field '%s' (%.1f ms)",
            len(records),
            path,
            self.array_field,
            elapsed,
        )
        return records

    def _extract_records(self, document: Any, path: Path) -> List[Record]:
        if not isinstance(document, dict):
            raise MalformedInputError(
                f"JSON file '{path}' must hold an object with a '{self.array_field}' array, "
                f"got {type(document).__name__}"
            )
        if self.array_field not in document:
            raise MissingFieldError(self.array_field, where=f"JSON file '{path}'")

        entries = document[self.array_field]
        if not isinstance(entries, list):
            raise MalformedInputError(
                f"Field '{self.array_field}' in '{path}' must be an array, got {type(entries).__name__}"
            )

        records: List[Record] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise MalformedInputError(
                    f"Entry {index} of '{self.array_field}' in '{path}' must be an object, "
                    f"got {type(entry).__name__}"
                )
            if self.content_field not in entry:
                raise MissingFieldError(self.content_field, where=f"entry {index} of '{path}'")
            records.append(dict(entry))
        return records
