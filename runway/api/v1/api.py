from fastapi import APIRouter

from runway.api.v1.routes import (
    accounts,
    analytics,
    auth,
    budgets,
    company,
    forecasts,
    reports,
    transactions,
    users,
)

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth")
api_router.include_router(users.router, prefix="/users")
api_router.include_router(company.router)
api_router.include_router(accounts.router)
api_router.include_router(transactions.router)
api_router.include_router(budgets.router)
api_router.include_router(analytics.router)
api_router.include_router(forecasts.router)
api_router.include_router(reports.router)
