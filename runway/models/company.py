# runway/models/company.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, ForeignKey, DateTime, Uuid
from sqlalchemy.orm import relationship
from runway.core.database import Base

class Company(Base):
    __tablename__ = "companies"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    name = Column(String(length=150), nullable=False)
    industry = Column(String(length=100), nullable=True)
    team_size = Column(String(length=50), nullable=True)   # e.g. "1-5", "6-20"
    stage = Column(String(length=50), nullable=True)       # e.g. "pre-seed", "series-a"

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="company", lazy="joined")

    def __repr__(self):
        return f"<Company name={self.name} user_id={self.user_id}>"
