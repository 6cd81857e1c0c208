"""Tests for request validation on partial updates and transaction dates."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from runway.schemas.account import AccountUpdate
from runway.schemas.budget import BudgetUpdate
from runway.schemas.company import CompanyUpdate
from runway.schemas.transaction import TransactionUpdate


@pytest.mark.parametrize(
    "schema,field",
    [
        (TransactionUpdate, "amount"),
        (TransactionUpdate, "description"),
        (TransactionUpdate, "date"),
        (TransactionUpdate, "type"),
        (AccountUpdate, "name"),
        (AccountUpdate, "balance"),
        (BudgetUpdate, "monthly_limit"),
        (CompanyUpdate, "name"),
    ],
)
def test_null_for_required_column_fails(schema, field):
    with pytest.raises(ValidationError):
        schema.model_validate({field: None})


def test_unset_and_nullable_fields_are_allowed():
    assert TransactionUpdate().model_dump(exclude_unset=True) == {}
    assert TransactionUpdate(category=None).model_dump(exclude_unset=True) == {"category": None}
    assert AccountUpdate(bank_name=None).model_dump(exclude_unset=True) == {"bank_name": None}


def test_aware_date_becomes_local_naive():
    aware = datetime(2024, 3, 31, 23, 30, tzinfo=timezone(timedelta(hours=-5)))

    update = TransactionUpdate(date=aware)

    assert update.date.tzinfo is None
    assert update.date == aware.astimezone().replace(tzinfo=None)
    assert TransactionUpdate(date=datetime(2024, 3, 1)).date == datetime(2024, 3, 1)
