# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: FieldNormalizer
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from errors.PipelineErrors import NormalizationError
from utility.logging_utils import get_class_logger

Record = Dict[str, Any]


@dataclass(frozen=True)
class FieldStats:
    """Min/max of one numeric field, taken from the untouched values."""
    field: str
    minimum: float
    maximum: float

    @property
    def span(self) -> float:
        return self.maximum - self.minimum

    def scale(self, value: float) -> float:
        # A constant column has no range; every value maps to 0.0
        if self.span == 0:
            return 0.0
        return (value - self.minimum) / self.span


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a loaded value to a finite float, or None when it is not numeric.
    Booleans and blank strings are not numbers here.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        if not value.strip():
            return None
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


class FieldNormalizer:
    """
    Rescales every numeric field of a record set to [0, 1] using min/max.

    Numeric fields are the ones whose value in the first record is a number.
    All records are checked against that schema before anything is rewritten,
    so a bad value later in the set fails the whole pass with NormalizationError
    and leaves the records untouched.
    """

    def __init__(
            self,
            *,
            exclude_fields: Optional[Iterable[str]] = None,
            logger: logging.Logger | None = None,
    ):
        self.exclude_fields = set(exclude_fields or ())
        self.logger = logger or get_class_logger(self.__class__)

    def numeric_fields(self, first: Record) -> List[str]:
        return [
            key
            for key, value in first.items()
            if key not in self.exclude_fields and to_number(value) is not None
        ]

    def compute_stats(self, records: List[Record], fields: List[str]) -> Dict[str, FieldStats]:
        """Schema pass + min/max pass over all records. Does not mutate anything."""
        columns: Dict[str, List[float]] = {f: [] for f in fields}

        for index, record in enumerate(records):
            for field in fields:
                if field not in record:
                    raise NormalizationError(
                        f"Record {index} has no value for numeric field '{field}'"
                    )
                number = to_number(record[field])
                if number is None:
                    raise NormalizationError(
                        f"Record {index} has non-numeric value {record[field]!r} "
                        f"for numeric field '{field}'"
                    )
                columns[field].append(number)

        return {
            field: FieldStats(field=field, minimum=min(values), maximum=max(values))
            for field, values in columns.items()
        }

    def normalize(self, records: List[Record]) -> List[Record]:
        if not records:
            self.logger.info("No records to normalise")
            return records

        fields = self.numeric_fields(records[0])
        if not fields:
            self.logger.info("No numeric fields found; %d record(s) left as loaded", len(records))
            return records

        stats = self.compute_stats(records, fields)

        for record in records:
            for field in fields:
                record[field] = stats[field].scale(to_number(record[field]))

        for s in stats.values():
            if s.span == 0:
                self.logger.warning(
                    "Field '%s' has a single value (%s) across all records; normalised to 0.0",
                    s.field,
                    s.minimum,
                )

        self.logger.info(
            "Normalised %d numeric field(s) %s across %d record(s)",
            len(fields),
            fields,
            len(records),
        )
        return records
