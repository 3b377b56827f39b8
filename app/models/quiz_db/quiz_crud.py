from typing import List, Optional, Sequence
from sqlalchemy.orm import Session

from app.models.quiz_db.option_db import PersonalityOption
from app.models.quiz_db.question_db import PersonalityQuestion
from app.models.quiz_db.quiz_db import PersonalityQuiz
from app.models.quiz_db.result_db import PersonalityQuizResult
from app.models.quiz_db.type_db import PersonalityType


def get_quiz(db: Session, quiz_id: str) -> Optional[PersonalityQuiz]:
    return db.query(PersonalityQuiz).filter(PersonalityQuiz.id == quiz_id).first()


def get_quizzes_by_user(db: Session, user_id: str, only_active: bool = True) -> List[PersonalityQuiz]:
    query = db.query(PersonalityQuiz).filter(PersonalityQuiz.user_id == user_id)
    if only_active:
        query = query.filter(PersonalityQuiz.is_active.is_(True))
    return query.order_by(PersonalityQuiz.created_at, PersonalityQuiz.id).all()


def get_type(db: Session, type_id: str) -> Optional[PersonalityType]:
    return db.query(PersonalityType).filter(PersonalityType.id == type_id).first()


def get_types_by_quiz(db: Session, quiz_id: str) -> List[PersonalityType]:
    return (
        db.query(PersonalityType)
        .filter(PersonalityType.quiz_id == quiz_id)
        .order_by(PersonalityType.created_at)
        .all()
    )


def get_question(db: Session, question_id: str) -> Optional[PersonalityQuestion]:
    return db.query(PersonalityQuestion).filter(PersonalityQuestion.id == question_id).first()


def get_questions_by_quiz(db: Session, quiz_id: str) -> List[PersonalityQuestion]:
    return (
        db.query(PersonalityQuestion)
        .filter(PersonalityQuestion.quiz_id == quiz_id)
        .order_by(PersonalityQuestion.order_index, PersonalityQuestion.created_at)
        .all()
    )


def get_option(db: Session, option_id: str) -> Optional[PersonalityOption]:
    return db.query(PersonalityOption).filter(PersonalityOption.id == option_id).first()


def get_options_by_questions(db: Session, question_ids: Sequence[str]) -> List[PersonalityOption]:
    if not question_ids:
        return []
    return (
        db.query(PersonalityOption)
        .filter(PersonalityOption.question_id.in_(list(question_ids)))
        .order_by(PersonalityOption.order_index, PersonalityOption.created_at)
        .all()
    )


def delete_options_by_question(db: Session, question_id: str) -> int:
    return (
        db.query(PersonalityOption)
        .filter(PersonalityOption.question_id == question_id)
        .delete(synchronize_session=False)
    )


def detach_results_from_type(db: Session, type_id: str) -> int:
    """Clear dominant_type_id on every result pointing at the given type."""
    return (
        db.query(PersonalityQuizResult)
        .filter(PersonalityQuizResult.dominant_type_id == type_id)
        .update({PersonalityQuizResult.dominant_type_id: None}, synchronize_session=False)
    )


def get_results_by_user(
    db: Session, user_id: str, quiz_id: Optional[str] = None
) -> List[PersonalityQuizResult]:
    query = db.query(PersonalityQuizResult).filter(PersonalityQuizResult.user_id == user_id)
    if quiz_id:
        query = query.filter(PersonalityQuizResult.quiz_id == quiz_id)
    return query.order_by(PersonalityQuizResult.created_at.desc()).all()
