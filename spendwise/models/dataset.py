import datetime as dt
from decimal import Decimal
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spendwise.core.errors import NotFoundError


def _decimal_from_float(value):
    # floats go through str() so 12.1 stays 12.1 instead of its binary expansion
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: dt.date
    category: str = Field(min_length=1)
    amount: Decimal = Field(ge=0)

    @field_validator("date", mode="before")
    @classmethod
    def parse_iso_date(cls, value):
        # YYYY-MM-DD strings only, never numeric timestamps
        if isinstance(value, dt.date):
            return value
        if not isinstance(value, str):
            raise ValueError("date must be an ISO-8601 string")
        return dt.date.fromisoformat(value)

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value):
        return _decimal_from_float(value)


class PersonRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    period: str = ""
    budget_limit: Decimal = Field(alias="budgetLimit", ge=0)
    transactions: Tuple[Transaction, ...] = ()

    @field_validator("budget_limit", mode="before")
    @classmethod
    def coerce_budget(cls, value):
        return _decimal_from_float(value)


class Dataset(BaseModel):
    """Immutable collection of person records, looked up by id."""

    model_config = ConfigDict(frozen=True)

    records: Tuple[PersonRecord, ...] = ()

    def person_ids(self) -> List[str]:
        return [record.id for record in self.records]

    def get(self, person_id: str) -> PersonRecord:
        for record in self.records:
            if record.id == person_id:
                return record
        raise NotFoundError(person_id)
