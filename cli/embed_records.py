# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: embed_records.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import settings
from config.Config import Config
from embedding.EmbeddingResult import EmbeddingResult
from embedding.RecordEmbedder import RecordEmbedder
from errors.PipelineErrors import PipelineError
from services.RecordEmbedService import RecordEmbedService
from utility.logging_utils import get_logger

logger = get_logger("cli.embed_records")


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        # Any usage error (missing path included) is a fatal run error -> exit 1
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="embed-records",
        description="Generate an embedding for the 'content' field of every record in a CSV or JSON file.",
    )
    parser.add_argument("path", help="Input file (.csv with a header row, or .json with a 'data' array)")
    return parser


def log_embedding(result: EmbeddingResult) -> None:
    logger.info("Generated Embeddings: %s", result.vector)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = Config.from_env()
        logger.info("Config: %s", cfg.summary())

        service = RecordEmbedService(
            embedder=RecordEmbedder(cfg),
            content_field=settings.CONTENT_FIELD,
            json_array_field=settings.JSON_ARRAY_FIELD,
            fail_fast=settings.FAIL_FAST,
            show_progress=settings.SHOW_PROGRESS,
        )
        report = service.run(args.path, sink=log_embedding)
    except PipelineError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        return 1

    logger.info(
        "Done: %d/%d record(s) embedded from '%s'",
        report.succeeded,
        report.total,
        report.path,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
