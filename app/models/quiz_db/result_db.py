from sqlalchemy import Column, String, ForeignKey, DateTime, Text
from app.core.database import Base
from app.models.quiz_db.quiz_db import new_id, utcnow
from app.models.quiz_db.scores import decode_scores


class PersonalityQuizResult(Base):
    __tablename__ = "personality_quiz_results"

    id = Column(String(36), primary_key=True, default=new_id, index=True)
    quiz_id = Column(String(36), ForeignKey("personality_quizzes.id"), nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)

    dominant_type_id = Column(
        String(36),
        ForeignKey("personality_types.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    result_summary = Column(Text, nullable=True)  # explanation shown to the user

    scores_json = Column(Text, nullable=True)  # full type score breakdown
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    @property
    def scores(self):
        return decode_scores(self.scores_json)
