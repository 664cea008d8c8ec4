# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: PipelineErrors
# -----------------------------------------------------------------------------
from typing import Optional


class PipelineError(Exception):
    """
    Base class for every failure that ends a record embedding run.

    When raised out of a run, `report` holds the PipelineReport of the
    failed run (state FAILED, progress reached so far).
    """

    report = None


class UnsupportedFileTypeError(PipelineError):
    def __init__(self, path: str, extension: str):
        self.path = path
        self.extension = extension
        super().__init__(
            f"Unsupported file type '{extension}' for '{path}'. Only json and csv files are supported."
        )


class MissingFieldError(PipelineError):
    def __init__(self, field: str, where: str = ""):
        self.field = field
        self.where = where
        location = f" in {where}" if where else ""
        super().__init__(f"Expected field '{field}' is missing{location}")


class MalformedInputError(PipelineError):
    pass


class MissingCredentialError(PipelineError):
    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(f"Missing required credential: environment variable {env_var} is not set")


class EmbeddingRequestError(PipelineError):
    """Raised when the embedding service call fails; the original error is chained as __cause__."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class NormalizationError(PipelineError):
    pass
