# runway/models/account.py
import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, ForeignKey, Numeric, Boolean, DateTime, Uuid
from sqlalchemy.orm import relationship
from runway.core.database import Base

class AccountType(str, enum.Enum):
    checking = "checking"
    savings = "savings"
    credit = "credit"

class Account(Base):
    __tablename__ = "accounts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(length=150), nullable=False)
    type = Column(String(length=20), nullable=False)  # checking, savings, credit
    # Fixed-point currency, never a float
    balance = Column(Numeric(12, 2), nullable=False, default=0)
    currency = Column(String(length=3), nullable=False, default="USD")
    bank_name = Column(String(length=150), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    # Filled in by the simulated bank connection
    external_id = Column(String, nullable=True)
    access_token = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="accounts", lazy="joined")
    transactions = relationship("Transaction", back_populates="account", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Account name={self.name} balance={self.balance} user_id={self.user_id}>"
