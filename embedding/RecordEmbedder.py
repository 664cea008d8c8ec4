# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: RecordEmbedder
# -----------------------------------------------------------------------------
import logging
import time
from typing import Any, List, Optional

import numpy as np
from openai import APIStatusError, OpenAI, OpenAIError

from config.Config import Config
from errors.PipelineErrors import EmbeddingRequestError
from utility.logging_utils import get_class_logger


class RecordEmbedder:
    """
    One text in, one embedding vector out, via the OpenAI embeddings endpoint.

    Exactly one request per call, no batching and no retries: the SDK's own
    retry loop is switched off so a failure surfaces on the first attempt.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            client: Optional[OpenAI] = None,
            logger: Optional[logging.Logger] = None,
    ):
        self.cfg = cfg
        self.model = cfg.openai_embed_model
        self.logger = logger or get_class_logger(self.__class__)

        self.client = client or OpenAI(
            api_key=cfg.openai_api_key,
            base_url=cfg.openai_base_url,
            timeout=cfg.openai_timeout_seconds,
            max_retries=0,
        )
        self.logger.info("OpenAI Embedder initialized model='%s' base_url='%s'", self.model, cfg.openai_base_url)

    def embed(self, text: str) -> List[float]:
        start_time = time.time()
        try:
            resp = self.client.embeddings.create(
                model=self.model,
                input=text,
                encoding_format="float",
            )
        except APIStatusError as e:
            raise EmbeddingRequestError(
                f"Embedding service returned HTTP {e.status_code}: {e.message}",
                status_code=e.status_code,
            ) from e
        except OpenAIError as e:
            raise EmbeddingRequestError(f"Embedding request failed: {e}") from e
        except (ValueError, TypeError, AttributeError) as e:
            # Body the SDK could not decode (not JSON, wrong shape)
            raise EmbeddingRequestError(f"Malformed embedding response: {e}") from e

        vector = self._first_vector(resp)

        elapsed = (time.time() - start_time) * 1000.0
        self.logger.debug("Embedded %d char(s) -> %d dim(s) (%.1f ms)", len(text), len(vector), elapsed)
        return vector

    @staticmethod
    def _first_vector(resp: Any) -> List[float]:
        """Pull data[0].embedding out of the response and check it is a flat list of numbers."""
        data = getattr(resp, "data", None)
        if not isinstance(data, list):
            raise EmbeddingRequestError(
                f"Embedding response 'data' must be a list, got {type(data).__name__}"
            )
        if not data:
            raise EmbeddingRequestError("Embedding response contained no embeddings")

        embedding = getattr(data[0], "embedding", None)
        if not isinstance(embedding, list) or not embedding:
            raise EmbeddingRequestError("Embedding response is missing a numeric 'embedding' list")

        # numpy would happily parse "1.5"; only real JSON numbers count
        bad = [v for v in embedding if isinstance(v, bool) or not isinstance(v, (int, float))]
        if bad:
            raise EmbeddingRequestError(
                f"Embedding response is not a list of numbers (first bad value {bad[0]!r})"
            )

        arr = np.asarray(embedding, dtype=np.float64)
        if not np.all(np.isfinite(arr)):
            raise EmbeddingRequestError("Embedding response contains NaN or infinite values")
        return arr.tolist()
