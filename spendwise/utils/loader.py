import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from spendwise.core.errors import ValidationError
from spendwise.models.dataset import Dataset
from spendwise.utils.validator import validate_dataset

logger = logging.getLogger(__name__)


def _error_indices(loc: Tuple[Any, ...]) -> Tuple[Optional[int], Optional[int]]:
    """Pull record/transaction positions out of a pydantic error location."""
    record_index = transaction_index = None
    if len(loc) >= 2 and loc[0] == "records" and isinstance(loc[1], int):
        record_index = loc[1]
        if len(loc) >= 4 and loc[2] == "transactions" and isinstance(loc[3], int):
            transaction_index = loc[3]
    return record_index, transaction_index


def build_dataset(payload: Mapping[str, Any]) -> Dataset:
    """Validate a JSON-shaped payload and build the immutable Dataset."""
    validate_dataset(payload)
    try:
        return Dataset.model_validate(payload)
    except PydanticValidationError as e:
        first = e.errors()[0]
        record_index, transaction_index = _error_indices(tuple(first["loc"]))
        field = first["loc"][-1] if first["loc"] else "data"
        raise ValidationError(
            f"Invalid {field}: {first['msg']}",
            record_index=record_index,
            transaction_index=transaction_index,
        ) from e


def load_dataset_file(path: Union[str, Path]) -> Dataset:
    data_file = Path(path)
    try:
        with data_file.open(encoding="utf-8") as fp:
            payload = json.load(fp)
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationError(f"Failed to load data from {data_file}: {e}") from e

    dataset = build_dataset(payload)
    logger.info(f"Loaded data for {len(dataset.records)} people from {data_file}")
    return dataset
