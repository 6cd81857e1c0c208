# runway/models/transaction.py
import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, ForeignKey, Numeric, Boolean, DateTime, JSON, Uuid
from sqlalchemy.orm import relationship
from runway.core.database import Base

class TransactionType(str, enum.Enum):
    income = "income"
    expense = "expense"
    transfer = "transfer"

class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    account_id = Column(Uuid(as_uuid=True), ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # Expenses may be stored negative or positive; aggregations take abs()
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(String(length=255), nullable=False)
    category = Column(String(length=100), nullable=True)
    subcategory = Column(String(length=100), nullable=True)
    date = Column(DateTime, nullable=False, index=True)
    type = Column(String(length=20), nullable=False)  # income, expense, transfer
    external_id = Column(String, nullable=True)
    is_recurring = Column(Boolean, nullable=False, default=False)
    tags = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    account = relationship("Account", back_populates="transactions")
    user = relationship("User", back_populates="transactions")

    def __repr__(self):
        return f"<Transaction type={self.type} amount={self.amount} date={self.date} user_id={self.user_id}>"
