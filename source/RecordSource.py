# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: RecordSource
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

from utility.logging_utils import get_class_logger

Record = Dict[str, Any]


class RecordSource(ABC):
    """
    Loads an ordered list of records (field name -> value) from a local file.

    Subclasses declare the extension they handle in `file_type` and implement
    `load()`. Every record handed back carries the content field.
    """

    file_type: str = ""

    def __init__(
            self,
            *,
            content_field: str = "content",
            logger: logging.Logger | None = None,
    ):
        self.content_field = content_field
        self.logger = logger or get_class_logger(self.__class__)

    @abstractmethod
    def load(self, path: str | Path) -> List[Record]:
        raise NotImplementedError
