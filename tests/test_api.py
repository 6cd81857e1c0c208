"""HTTP tests against the FastAPI app with an in-memory database."""

from datetime import datetime
from decimal import Decimal

from runway.api.deps import get_current_user
from runway.core.auth import create_access_token
from runway.crud.account import create_account_for_user
from runway.main import app
from runway.schemas.account import AccountCreate


def _now():
    return datetime.now().isoformat()


async def _create_account(client, balance="45000.00", name="Mercury Checking"):
    resp = await client.post("/api/v1/accounts", json={
        "name": name,
        "type": "checking",
        "balance": balance,
        "bank_name": "Mercury",
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


async def _create_tx(client, account_id, amount, tx_type="expense", category="Engineering", date=None):
    resp = await client.post("/api/v1/transactions", json={
        "account_id": account_id,
        "amount": amount,
        "description": "AWS Services",
        "category": category,
        "date": date or _now(),
        "type": tx_type,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


async def test_requests_without_token_are_rejected(client):
    app.dependency_overrides.pop(get_current_user)

    resp = await client.get("/api/v1/financial-summary")

    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authenticated"


async def test_bearer_token_resolves_user(client, user):
    app.dependency_overrides.pop(get_current_user)
    token = create_access_token(str(user.id))

    resp = await client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
    bad = await client.get("/api/v1/users/me", headers={"Authorization": "Bearer nope"})

    assert resp.status_code == 200
    assert resp.json()["email"] == user.email
    assert bad.status_code == 401


async def test_financial_summary_and_breakdown(client):
    checking = await _create_account(client, "45000.00")
    await _create_account(client, "125000.00", name="SVB Savings")
    await _create_tx(client, checking["id"], "-2847.00")
    await _create_tx(client, checking["id"], "45000.00", tx_type="income", category="Revenue")

    summary = await client.get("/api/v1/financial-summary")
    breakdown = await client.get("/api/v1/expense-breakdown")

    assert summary.status_code == 200
    assert summary.json() == {
        "total_balance": 170000.0,
        "monthly_burn": -42153.0,
        "monthly_revenue": 45000.0,
        "runway_months": 999.0,
    }
    assert breakdown.json() == [{"category": "Engineering", "amount": 2847.0, "percentage": 100.0}]


async def test_empty_user_gets_zero_summary(client):
    resp = await client.get("/api/v1/financial-summary")

    assert resp.json() == {
        "total_balance": 0.0,
        "monthly_burn": 0.0,
        "monthly_revenue": 0.0,
        "runway_months": 999.0,
    }
    assert (await client.get("/api/v1/expense-breakdown")).json() == []


async def test_malformed_amount_rejected_at_ingestion(client):
    account = await _create_account(client)

    for amount in ["twelve", "1.234"]:
        resp = await client.post("/api/v1/transactions", json={
            "account_id": account["id"],
            "amount": amount,
            "description": "Bad",
            "date": _now(),
            "type": "expense",
        })
        assert resp.status_code == 422


async def test_foreign_account_is_invisible(client, db_session, other_user):
    theirs = await create_account_for_user(
        other_user.id,
        AccountCreate(name="Not mine", type="checking", balance=Decimal("10.00")),
        db_session,
    )

    assert (await client.get(f"/api/v1/accounts/{theirs.id}")).status_code == 404
    assert (await client.post(f"/api/v1/accounts/{theirs.id}/sync")).status_code == 404

    resp = await client.post("/api/v1/transactions", json={
        "account_id": str(theirs.id),
        "amount": "-1.00",
        "description": "Sneaky",
        "date": _now(),
        "type": "expense",
    })
    assert resp.status_code == 400


async def test_connect_and_sync(client):
    resp = await client.post("/api/v1/accounts/connect", json={"bank_name": "Chase", "account_type": "savings"})

    assert resp.status_code == 201, resp.text
    connected = resp.json()
    account = connected["account"]
    assert account["name"] == "Chase savings"
    assert account["external_id"].startswith("mock_")
    assert connected["transaction_count"] > 0

    history = await client.get("/api/v1/transactions", params={"limit": 1000})
    assert len(history.json()) == connected["transaction_count"]

    sync = await client.post(f"/api/v1/accounts/{account['id']}/sync")
    assert sync.status_code == 200
    body = sync.json()
    assert 1 <= body["new_transactions"] <= 3
    expected = Decimal(account["balance"]) + Decimal(str(body["balance_change"]))
    assert Decimal(str(body["new_balance"])) == expected

    refreshed = await client.get(f"/api/v1/accounts/{account['id']}")
    assert Decimal(refreshed.json()["balance"]) == expected

    per_account = await client.get(f"/api/v1/accounts/{account['id']}/transactions")
    assert len(per_account.json()) == connected["transaction_count"] + body["new_transactions"]


async def test_transaction_crud_and_bulk_update(client):
    account = await _create_account(client)
    first = await _create_tx(client, account["id"], "-10.00", category=None)
    second = await _create_tx(client, account["id"], "-20.00", category=None)

    resp = await client.put("/api/v1/transactions/bulk", json={
        "ids": [first["id"], second["id"]],
        "updates": {"category": "Legal"},
    })
    assert resp.status_code == 200
    assert {tx["category"] for tx in resp.json()} == {"Legal"}

    missing = "00000000-0000-0000-0000-000000000000"
    resp = await client.put("/api/v1/transactions/bulk", json={"ids": [first["id"], missing], "updates": {}})
    assert resp.status_code == 404
    assert missing in resp.json()["detail"]

    resp = await client.patch(f"/api/v1/transactions/{first['id']}", json={"description": "Lawyer"})
    assert resp.json()["description"] == "Lawyer"

    assert (await client.delete(f"/api/v1/transactions/{first['id']}")).status_code == 204
    assert (await client.get(f"/api/v1/transactions/{first['id']}")).status_code == 404


async def test_company_profile_is_single(client):
    assert (await client.get("/api/v1/company")).json() is None

    resp = await client.post("/api/v1/company", json={"name": "Acme", "stage": "seed"})
    assert resp.status_code == 201
    assert (await client.post("/api/v1/company", json={"name": "Again"})).status_code == 400

    resp = await client.patch("/api/v1/company", json={"stage": "series-a"})
    assert resp.json()["stage"] == "series-a"


async def test_budget_overview_flags_alerts(client):
    account = await _create_account(client)
    await _create_tx(client, account["id"], "-900.00", category="Marketing")
    await _create_tx(client, account["id"], "-50.00", category="Engineering")
    for category in ["Marketing", "Engineering"]:
        resp = await client.post("/api/v1/budgets", json={"category": category, "monthly_limit": "1000.00"})
        assert resp.status_code == 201

    resp = await client.get("/api/v1/budgets/overview")

    assert resp.status_code == 200
    overview = resp.json()
    assert overview["total_budgeted"] == 2000.0
    assert overview["total_spent"] == 950.0
    assert [alert["category"] for alert in overview["alerts"]] == ["Marketing"]
    assert overview["alerts"][0]["status"] == "warning"

    stored = {b["category"]: Decimal(b["current_spent"]) for b in (await client.get("/api/v1/budgets")).json()}
    assert stored == {"Marketing": Decimal("900.00"), "Engineering": Decimal("50.00")}


async def test_generate_forecasts(client):
    account = await _create_account(client, "120000.00")
    await _create_tx(client, account["id"], "-20000.00", category="Payroll")
    await _create_tx(client, account["id"], "10000.00", tx_type="income", category="Revenue")

    preview = await client.get("/api/v1/forecasts/scenarios", params={"months": 3})
    assert [s["name"] for s in preview.json()] == ["optimistic", "realistic", "pessimistic"]
    assert len(preview.json()[0]["projection"]) == 4

    resp = await client.post("/api/v1/forecasts/generate", json={
        "scenarios": [{"name": "hiring", "revenue_growth": 0, "burn_change": 25}],
        "months": 6,
    })
    assert resp.status_code == 201, resp.text
    [forecast] = resp.json()
    assert forecast["scenario_type"] == "hiring"
    # 120000 / (25000 - 10000)
    assert Decimal(forecast["runway_months"]) == Decimal("8")
    assert len(forecast["projection_data"]["balances"]) == 7

    listed = await client.get("/api/v1/forecasts")
    assert [f["id"] for f in listed.json()] == [forecast["id"]]
    assert (await client.delete(f"/api/v1/forecasts/{forecast['id']}")).status_code == 204


async def test_profitable_forecast_is_stored_capped(client):
    account = await _create_account(client, "1000.00")
    await _create_tx(client, account["id"], "5000.00", tx_type="income", category="Revenue")

    resp = await client.post("/api/v1/forecasts/generate", json={})

    assert resp.status_code == 201
    assert {Decimal(f["runway_months"]) for f in resp.json()} == {Decimal("999")}


async def test_reports(client):
    account = await _create_account(client, "10000.00")
    await _create_tx(client, account["id"], "-2000.00")

    resp = await client.post("/api/v1/reports", json={"type": "financial_summary", "format": "csv"})
    assert resp.status_code == 201, resp.text
    report = resp.json()
    assert report["file_name"].startswith("financial_summary_")
    assert report["file_name"].endswith(".csv")
    assert report["data"]["summary"]["runway_months"] == 5.0

    resp = await client.post("/api/v1/reports", json={"type": "transaction_history"})
    assert resp.json()["data"]["count"] == 1
    assert resp.json()["format"] == "pdf"

    resp = await client.post("/api/v1/reports", json={"type": "runway_analysis"})
    assert [s["name"] for s in resp.json()["data"]["scenarios"]] == ["optimistic", "realistic", "pessimistic"]

    assert len((await client.get("/api/v1/reports")).json()) == 3


async def test_explicit_null_on_required_column_is_rejected(client):
    account = await _create_account(client)
    tx = await _create_tx(client, account["id"], "-10.00")

    resp = await client.patch(f"/api/v1/transactions/{tx['id']}", json={"amount": None})
    assert resp.status_code == 422

    resp = await client.put("/api/v1/transactions/bulk", json={"ids": [tx["id"]], "updates": {"type": None}})
    assert resp.status_code == 422

    resp = await client.patch(f"/api/v1/accounts/{account['id']}", json={"balance": None})
    assert resp.status_code == 422

    # nullable columns can still be cleared
    resp = await client.patch(f"/api/v1/transactions/{tx['id']}", json={"category": None})
    assert resp.status_code == 200
    assert resp.json()["category"] is None
    assert Decimal((await client.get(f"/api/v1/transactions/{tx['id']}")).json()["amount"]) == Decimal("-10.00")


async def test_offset_dates_are_stored_as_local_time(client):
    account = await _create_account(client)
    sent = "2024-03-31T23:30:00-05:00"
    expected = datetime.fromisoformat(sent).astimezone().replace(tzinfo=None)

    tx = await _create_tx(client, account["id"], "-10.00", date=sent)
    assert datetime.fromisoformat(tx["date"]) == expected

    resp = await client.patch(f"/api/v1/transactions/{tx['id']}", json={"date": "2024-04-01T04:30:00Z"})
    assert resp.status_code == 200
    assert datetime.fromisoformat(resp.json()["date"]) == expected


async def test_negative_runway_is_stored_within_column_bounds(client):
    account = await _create_account(client, "-1000000.00")
    await _create_tx(client, account["id"], "-100.00")

    resp = await client.post("/api/v1/forecasts/generate", json={})

    assert resp.status_code == 201, resp.text
    assert {Decimal(f["runway_months"]) for f in resp.json()} == {Decimal("-999")}
