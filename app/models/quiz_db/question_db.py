from sqlalchemy import Column, String, ForeignKey, Integer, DateTime, Text
from app.core.database import Base
from app.models.quiz_db.quiz_db import new_id, utcnow


class PersonalityQuestion(Base):
    __tablename__ = "personality_questions"

    id = Column(String(36), primary_key=True, default=new_id, index=True)
    quiz_id = Column(String(36), ForeignKey("personality_quizzes.id"), nullable=False, index=True)

    order_index = Column(Integer, nullable=False)
    question_text = Column(Text, nullable=False)
    help_text = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
