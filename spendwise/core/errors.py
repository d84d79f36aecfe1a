"""
Exception types raised by the validator and the metrics engine.
"""

from typing import Optional


class SpendwiseError(Exception):
    """Base exception for spendwise errors"""


class ValidationError(SpendwiseError):
    """
    Structural defect in a dataset. The whole dataset is rejected.

    Indices are zero-based; the message shows them one-based.
    """

    def __init__(
        self,
        message: str,
        record_index: Optional[int] = None,
        transaction_index: Optional[int] = None,
    ) -> None:
        self.record_index = record_index
        self.transaction_index = transaction_index
        self.reason = message
        super().__init__(self._format(message))

    def _format(self, message: str) -> str:
        if self.record_index is None:
            return message
        prefix = f"Record {self.record_index + 1}"
        if self.transaction_index is not None:
            prefix += f", Transaction {self.transaction_index + 1}"
        return f"{prefix}: {message}"


class NotFoundError(SpendwiseError):
    """Raised when a person id is not present in the dataset"""

    def __init__(self, person_id: str) -> None:
        self.person_id = person_id
        super().__init__(f"Person {person_id} not found")
