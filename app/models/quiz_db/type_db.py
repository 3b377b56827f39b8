from sqlalchemy import Column, String, ForeignKey, DateTime, Text
from app.core.database import Base
from app.models.quiz_db.quiz_db import new_id, utcnow


class PersonalityType(Base):
    __tablename__ = "personality_types"

    id = Column(String(36), primary_key=True, default=new_id, index=True)
    quiz_id = Column(String(36), ForeignKey("personality_quizzes.id"), nullable=False, index=True)

    code = Column(String, nullable=False)  # "A", "B", "INTROVERT"...
    name = Column(String, nullable=False)  # "The Strategist"
    description = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
