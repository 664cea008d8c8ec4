# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: RecordEmbedService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from tqdm import tqdm

from embedding.EmbeddingResult import EmbeddingResult
from embedding.RecordEmbedder import RecordEmbedder
from errors.PipelineErrors import EmbeddingRequestError, PipelineError, UnsupportedFileTypeError
from normalizer.FieldNormalizer import FieldNormalizer
from normalizer.TextNormalizer import normalize_text
from source.CsvRecordSource import CsvRecordSource
from source.JsonRecordSource import JsonRecordSource
from source.RecordSource import Record, RecordSource
from utility.logging_utils import get_class_logger

EmbeddingSink = Callable[[EmbeddingResult], None]


class PipelineState(str, Enum):
    SELECTING_SOURCE = "SELECTING_SOURCE"
    LOADING = "LOADING"
    NORMALIZING = "NORMALIZING"
    ITERATING = "ITERATING"
    DONE = "DONE"
    FAILED = "FAILED"


@dataclass
class PipelineReport:
    path: str
    total: int
    processed: int
    state: PipelineState
    failed_indices: List[int] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return self.processed - len(self.failed_indices)


class RecordEmbedService:
    """
    Owns the record embedding run:
      - pick a record source from the file extension (csv / json)
      - load every record
      - rescale numeric fields to [0, 1] once over the full set
      - for each record in load order: clean the content text, embed it,
        advance progress, hand the vector to the sink

    Any failure moves the run to FAILED and is re-raised to the caller;
    the service never exits the process.
    """

    def __init__(
        self,
        *,
        embedder: RecordEmbedder,
        sources: Optional[Iterable[RecordSource]] = None,
        normalizer: Optional[FieldNormalizer] = None,
        content_field: str = "content",
        json_array_field: str = "data",
        fail_fast: bool = True,
        show_progress: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        self.embedder = embedder
        self.content_field = content_field
        self.fail_fast = fail_fast
        self.show_progress = show_progress
        self.logger = logger or get_class_logger(self.__class__)

        if sources is None:
            sources = self.build_default_sources(
                content_field=content_field,
                json_array_field=json_array_field,
            )
        self.sources: Dict[str, RecordSource] = {s.file_type: s for s in sources}
        self.normalizer = normalizer or FieldNormalizer(exclude_fields=[content_field])

        self.state = PipelineState.SELECTING_SOURCE
        self.progress = 0
        self.total = 0
        self.error: Optional[BaseException] = None
        self.failed_indices: List[int] = []

    @staticmethod
    def build_default_sources(
        *,
        content_field: str = "content",
        json_array_field: str = "data",
    ) -> List[RecordSource]:
        return [
            CsvRecordSource(content_field=content_field),
            JsonRecordSource(array_field=json_array_field, content_field=content_field),
        ]

    def select_source(self, path: str | Path) -> RecordSource:
        """Match on the text after the last '.', case-sensitive. No file I/O happens here."""
        name = Path(path).name
        extension = name.rsplit(".", 1)[-1] if "." in name else ""
        source = self.sources.get(extension)
        if source is None:
            raise UnsupportedFileTypeError(str(path), extension)
        return source

    def run(self, path: str | Path, sink: Optional[EmbeddingSink] = None) -> PipelineReport:
        self.state = PipelineState.SELECTING_SOURCE
        self.progress = 0
        self.total = 0
        self.error = None
        self.failed_indices = []
        start_time = time.time()

        try:
            source = self.select_source(path)

            self.state = PipelineState.LOADING
            self.logger.info("Loading records from '%s' (%s)", path, source.file_type)
            records = source.load(path)
            self.total = len(records)

            self.state = PipelineState.NORMALIZING
            records = self.normalizer.normalize(records)

            self.state = PipelineState.ITERATING
            self._embed_records(records, sink)

            self.state = PipelineState.DONE
        except PipelineError as e:
            self._fail(e)
            e.report = self.report(path)
            self.logger.error("Run failed for '%s' after %d/%d record(s): %s", path, self.progress, self.total, e)
            raise
        except Exception as e:
            self._fail(e)
            self.logger.exception("Unexpected failure for '%s' after %d/%d record(s)", path, self.progress, self.total)
            raise

        elapsed = (time.time() - start_time) * 1000.0
        self.logger.info(
            "Embedded %d/%d record(s) from '%s' (%d failed, %.1f ms)",
            self.progress - len(self.failed_indices),
            self.total,
            path,
            len(self.failed_indices),
            elapsed,
        )
        return self.report(path)

    def report(self, path: str | Path) -> PipelineReport:
        """Snapshot of the current (or last) run."""
        return PipelineReport(
            path=str(path),
            total=self.total,
            processed=self.progress,
            failed_indices=list(self.failed_indices),
            state=self.state,
        )

    def _embed_records(self, records: List[Record], sink: Optional[EmbeddingSink]) -> None:
        with tqdm(total=len(records), disable=not self.show_progress, unit="record") as bar:
            for index, record in enumerate(records):
                raw = record.get(self.content_field)
                text = normalize_text(raw if isinstance(raw, str) or raw is None else str(raw))

                try:
                    vector = self.embedder.embed(text)
                except EmbeddingRequestError as e:
                    if self.fail_fast:
                        raise
                    self.logger.warning("Skipping record %d: %s", index, e)
                    self.failed_indices.append(index)
                    self._advance(bar)
                    continue

                self._advance(bar)
                if sink is not None:
                    sink(EmbeddingResult(index=index, text=text, vector=vector, record=record))

    def _advance(self, bar: tqdm) -> None:
        self.progress += 1
        bar.update(1)

    def _fail(self, error: BaseException) -> None:
        self.state = PipelineState.FAILED
        self.error = error
