import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.errors import Forbidden, NotFound, Unauthorized
from app.models.quiz_db.question_db import PersonalityQuestion
from app.models.quiz_db.quiz_crud import get_question, get_quiz
from app.models.quiz_db.quiz_db import PersonalityQuiz

logger = logging.getLogger(__name__)


def require_user(user_id: Optional[str]) -> str:
    if not user_id:
        raise Unauthorized()
    return user_id


def resolve_owned(db: Session, quiz_id: str, user_id: str) -> PersonalityQuiz:
    """Quiz the user may edit.

    System quizzes have no owner, so they never pass this check.
    """
    quiz = get_quiz(db, quiz_id)
    if not quiz:
        raise NotFound("Quiz not found.")

    if quiz.user_id is None or quiz.user_id != user_id:
        logger.warning("user %s denied write access to quiz %s", user_id, quiz_id)
        raise Forbidden("You do not have access to this quiz.")

    return quiz


def resolve_accessible(db: Session, quiz_id: str, user_id: str) -> PersonalityQuiz:
    """Quiz the user may read or take: system quizzes and their own."""
    quiz = get_quiz(db, quiz_id)
    if not quiz:
        raise NotFound("Quiz not found.")

    if not (quiz.is_system or (quiz.user_id is not None and quiz.user_id == user_id)):
        logger.warning("user %s denied read access to quiz %s", user_id, quiz_id)
        raise Forbidden("You do not have access to this quiz.")

    return quiz


def resolve_owned_question(db: Session, question_id: str, user_id: str) -> PersonalityQuestion:
    question = get_question(db, question_id)
    if not question:
        raise NotFound("Question not found.")

    resolve_owned(db, question.quiz_id, user_id)
    return question
