# runway/models/report.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, ForeignKey, DateTime, JSON, Uuid
from sqlalchemy.orm import relationship
from runway.core.database import Base

class Report(Base):
    __tablename__ = "reports"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(length=50), nullable=False)    # financial_summary, runway_analysis, expense_breakdown
    format = Column(String(length=10), nullable=False)  # pdf, csv, excel
    data = Column(JSON, nullable=False)
    file_name = Column(String(length=255), nullable=False)

    generated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="reports")

    def __repr__(self):
        return f"<Report type={self.type} file={self.file_name} user_id={self.user_id}>"
