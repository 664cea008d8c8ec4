# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: EmbeddingResult
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass
class EmbeddingResult:
    """Embedding vector + cleaned text + the (normalised) record it came from."""
    index: int
    text: str
    vector: List[float]
    record: Dict[str, Any]

    @property
    def dimension(self) -> int:
        return len(self.vector)
