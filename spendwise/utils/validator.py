import logging
from collections.abc import Mapping
from numbers import Number
from typing import Any

from spendwise.core.errors import ValidationError

logger = logging.getLogger(__name__)


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_amount(value: Any) -> bool:
    # bool is a Number subclass but never a valid amount
    return isinstance(value, Number) and not isinstance(value, bool)


def validate_dataset(payload: Any) -> None:
    """
    Check the structure of a JSON-shaped dataset before any analysis.

    Stops at the first defect and raises ``ValidationError`` carrying the
    record index and, for transaction defects, the transaction index. A zero
    amount or a zero budget is accepted; a missing one is not.
    """
    if not isinstance(payload, Mapping) or not isinstance(payload.get("records"), list):
        raise ValidationError("Invalid data structure: Missing records array")

    seen_ids = set()
    for index, record in enumerate(payload["records"]):
        if not isinstance(record, Mapping):
            raise ValidationError("Record is not an object", record_index=index)

        if not _is_text(record.get("id")) or not _is_text(record.get("name")) or record.get("budgetLimit") is None:
            raise ValidationError("Missing required fields", record_index=index)
        if record["id"] in seen_ids:
            raise ValidationError(f"Duplicate id {record['id']}", record_index=index)
        seen_ids.add(record["id"])

        transactions = record.get("transactions")
        if not isinstance(transactions, list):
            raise ValidationError("Missing or invalid transactions", record_index=index)

        for t_index, transaction in enumerate(transactions):
            if not isinstance(transaction, Mapping):
                raise ValidationError(
                    "Transaction is not an object", record_index=index, transaction_index=t_index
                )
            if (
                not _is_text(transaction.get("date"))
                or not _is_text(transaction.get("category"))
                or transaction.get("amount") is None
            ):
                raise ValidationError(
                    "Missing required fields", record_index=index, transaction_index=t_index
                )
            if not _is_amount(transaction["amount"]):
                raise ValidationError(
                    "Amount must be a number", record_index=index, transaction_index=t_index
                )

    logger.info(f"Data validation passed for {len(payload['records'])} records")
