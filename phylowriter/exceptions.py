"""
Custom exceptions for PhyloXML serialization.
"""

from __future__ import annotations

import logging
from typing import NoReturn

logger = logging.getLogger(__name__)


class PhyloWriterError(Exception):
    """Base exception for phylowriter errors."""

    pass


class OutputWriteError(PhyloWriterError):
    """Raised when the output stream does not accept written text."""

    @staticmethod
    def raise_write_failure(stage: str, cause: BaseException) -> NoReturn:
        """
        Raises an OutputWriteError for a failed write during one pass stage.

        Args:
            stage: The pass stage that was writing ("envelope open", "body", ...)
            cause: The exception reported by the stream

        Raises:
            OutputWriteError: Always raised, chained to ``cause``
        """
        message = f"Failed to write PhyloXML {stage}: {cause}"
        logger.error(message)
        raise OutputWriteError(message) from cause
