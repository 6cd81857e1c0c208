# runway/models/forecast.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, ForeignKey, Numeric, DateTime, JSON, Uuid
from sqlalchemy.orm import relationship
from runway.core.database import Base

class Forecast(Base):
    __tablename__ = "forecasts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    scenario_type = Column(String(length=50), nullable=False)  # optimistic, realistic, pessimistic
    projected_revenue = Column(Numeric(12, 2), nullable=True)
    projected_expenses = Column(Numeric(12, 2), nullable=True)
    runway_months = Column(Numeric(5, 2), nullable=True)
    assumptions = Column(JSON, nullable=True)       # revenue_growth, burn_change, months
    projection_data = Column(JSON, nullable=True)   # month-by-month balances

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="forecasts")

    def __repr__(self):
        return f"<Forecast scenario={self.scenario_type} runway={self.runway_months} user_id={self.user_id}>"
