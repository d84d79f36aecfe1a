"""
spendwise
~~~~~~~~~

Spending analysis for people with a budget and a ledger of dated,
categorized transactions. The SpendingAnalyzer turns one person's
transactions into a MetricsResult, and render_summary flattens that result
into the text block handed to narrative generation.
"""

from spendwise.core.errors import NotFoundError, SpendwiseError, ValidationError
from spendwise.models.dataset import Dataset, PersonRecord, Transaction
from spendwise.models.metrics import MetricsResult
from spendwise.utils.analyzer import SpendingAnalyzer
from spendwise.utils.loader import build_dataset, load_dataset_file
from spendwise.utils.summary import render_summary
from spendwise.utils.validator import validate_dataset

__all__ = [
    "Dataset",
    "MetricsResult",
    "NotFoundError",
    "PersonRecord",
    "SpendingAnalyzer",
    "SpendwiseError",
    "Transaction",
    "ValidationError",
    "build_dataset",
    "load_dataset_file",
    "render_summary",
    "validate_dataset",
]
