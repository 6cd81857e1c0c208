# runway/models/budget.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, ForeignKey, Numeric, Integer, Boolean, DateTime, Uuid
from sqlalchemy.orm import relationship
from runway.core.database import Base

class Budget(Base):
    __tablename__ = "budgets"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category = Column(String(length=100), nullable=False)
    monthly_limit = Column(Numeric(12, 2), nullable=False)
    # Refreshed from the month's expense breakdown on every overview request
    current_spent = Column(Numeric(12, 2), nullable=False, default=0)
    alert_threshold = Column(Integer, nullable=False, default=80)  # Percentage
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="budgets")

    def __repr__(self):
        return f"<Budget category={self.category} limit={self.monthly_limit} user_id={self.user_id}>"
