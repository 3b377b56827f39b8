from sqlalchemy import Column, String, ForeignKey, Integer, DateTime, Text
from app.core.database import Base
from app.models.quiz_db.quiz_db import new_id, utcnow
from app.models.quiz_db.scores import decode_scores


class PersonalityOption(Base):
    __tablename__ = "personality_options"

    id = Column(String(36), primary_key=True, default=new_id, index=True)
    question_id = Column(String(36), ForeignKey("personality_questions.id"), nullable=False, index=True)

    order_index = Column(Integer, nullable=False)
    option_text = Column(Text, nullable=False)

    # JSON map of type id -> score
    type_scores_json = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    @property
    def type_scores(self):
        return decode_scores(self.type_scores_json)
