import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import Forbidden, NotFound
from app.models.quiz_db.option_db import PersonalityOption
from app.models.quiz_db.question_db import PersonalityQuestion
from app.models.quiz_db.quiz_crud import (
    delete_options_by_question,
    detach_results_from_type,
    get_option,
    get_question,
    get_quizzes_by_user,
    get_type,
)
from app.models.quiz_db.quiz_db import PersonalityQuiz, new_id, utcnow
from app.models.quiz_db.scores import encode_scores
from app.models.quiz_db.type_db import PersonalityType
from app.schemas.quiz.option_base import OptionUpsert
from app.schemas.quiz.question_base import QuestionUpsert
from app.schemas.quiz.quiz_base import QuizCreate, QuizUpdate
from app.schemas.quiz.type_base import PersonalityTypeUpsert
from app.services.quiz_access import require_user, resolve_owned, resolve_owned_question

logger = logging.getLogger(__name__)


# Quizzes

def create_quiz(db: Session, user_id: Optional[str], payload: QuizCreate) -> str:
    user_id = require_user(user_id)
    now = utcnow()

    quiz = PersonalityQuiz(
        id=new_id(),
        user_id=user_id,
        title=payload.title,
        description=payload.description,
        category=payload.category,
        language=payload.language,
        is_system=False,
        is_active=True,
        created_at=now,
        updated_at=now,
    )
    db.add(quiz)
    db.commit()

    logger.info("quiz %s created by %s", quiz.id, user_id)
    return quiz.id


def update_quiz(db: Session, user_id: Optional[str], quiz_id: str, payload: QuizUpdate) -> None:
    user_id = require_user(user_id)
    quiz = resolve_owned(db, quiz_id, user_id)

    quiz.title = payload.title
    quiz.description = payload.description
    quiz.category = payload.category
    quiz.language = payload.language
    quiz.is_active = payload.is_active if payload.is_active is not None else quiz.is_active
    quiz.updated_at = utcnow()

    db.commit()
    logger.info("quiz %s updated by %s", quiz_id, user_id)


def archive_quiz(db: Session, user_id: Optional[str], quiz_id: str) -> None:
    """Soft delete. Types, questions and options are left in place."""
    user_id = require_user(user_id)
    quiz = resolve_owned(db, quiz_id, user_id)

    quiz.is_active = False
    quiz.updated_at = utcnow()

    db.commit()
    logger.info("quiz %s archived by %s", quiz_id, user_id)


def list_my_quizzes(
    db: Session, user_id: Optional[str], include_inactive: bool = False
) -> List[PersonalityQuiz]:
    user_id = require_user(user_id)
    return get_quizzes_by_user(db, user_id, only_active=not include_inactive)


# Personality types

def upsert_personality_type(
    db: Session, user_id: Optional[str], quiz_id: str, payload: PersonalityTypeUpsert
) -> str:
    user_id = require_user(user_id)
    quiz = resolve_owned(db, quiz_id, user_id)

    if payload.id:
        personality_type = get_type(db, payload.id)
        if not personality_type or personality_type.quiz_id != quiz.id:
            raise Forbidden("Type not found for this quiz.")

        personality_type.code = payload.code
        personality_type.name = payload.name
        personality_type.description = payload.description
        db.commit()
        return personality_type.id

    personality_type = PersonalityType(
        id=new_id(),
        quiz_id=quiz.id,
        code=payload.code,
        name=payload.name,
        description=payload.description,
        created_at=utcnow(),
    )
    db.add(personality_type)
    db.commit()

    logger.info("type %s added to quiz %s", personality_type.id, quiz.id)
    return personality_type.id


def delete_personality_type(db: Session, user_id: Optional[str], type_id: str, quiz_id: str) -> None:
    user_id = require_user(user_id)
    quiz = resolve_owned(db, quiz_id, user_id)

    personality_type = get_type(db, type_id)
    if not personality_type or personality_type.quiz_id != quiz.id:
        raise NotFound("Type not found.")

    # results keep their row but lose the dominant type reference
    detached = detach_results_from_type(db, type_id)
    db.delete(personality_type)
    db.commit()

    logger.info("type %s deleted from quiz %s (%d results detached)", type_id, quiz.id, detached)


# Questions

def upsert_question(
    db: Session, user_id: Optional[str], quiz_id: str, payload: QuestionUpsert
) -> str:
    user_id = require_user(user_id)
    quiz = resolve_owned(db, quiz_id, user_id)

    if payload.id:
        question = get_question(db, payload.id)
        if not question or question.quiz_id != quiz.id:
            raise Forbidden("Question not found for this quiz.")

        question.order_index = payload.order_index
        question.question_text = payload.question_text
        question.help_text = payload.help_text
        db.commit()
        return question.id

    question = PersonalityQuestion(
        id=new_id(),
        quiz_id=quiz.id,
        order_index=payload.order_index,
        question_text=payload.question_text,
        help_text=payload.help_text,
        created_at=utcnow(),
    )
    db.add(question)
    db.commit()

    logger.info("question %s added to quiz %s", question.id, quiz.id)
    return question.id


def delete_question(db: Session, user_id: Optional[str], question_id: str, quiz_id: str) -> None:
    """Hard delete of a question together with its options."""
    user_id = require_user(user_id)
    quiz = resolve_owned(db, quiz_id, user_id)

    question = get_question(db, question_id)
    if not question or question.quiz_id != quiz.id:
        raise NotFound("Question not found.")

    removed = delete_options_by_question(db, question_id)
    db.delete(question)
    db.commit()

    logger.info("question %s deleted from quiz %s with %d options", question_id, quiz.id, removed)


# Options

def upsert_option(
    db: Session, user_id: Optional[str], question_id: str, payload: OptionUpsert
) -> str:
    user_id = require_user(user_id)
    question = resolve_owned_question(db, question_id, user_id)

    if payload.id:
        option = get_option(db, payload.id)
        if not option or option.question_id != question.id:
            raise Forbidden("Option not found for this question.")

        option.order_index = payload.order_index
        option.option_text = payload.option_text
        if payload.type_scores is not None:
            option.type_scores_json = encode_scores(payload.type_scores)
        db.commit()
        return option.id

    option = PersonalityOption(
        id=new_id(),
        question_id=question.id,
        order_index=payload.order_index,
        option_text=payload.option_text,
        type_scores_json=encode_scores(payload.type_scores),
        created_at=utcnow(),
    )
    db.add(option)
    db.commit()

    logger.info("option %s added to question %s", option.id, question.id)
    return option.id


def delete_option(db: Session, user_id: Optional[str], option_id: str, question_id: str) -> None:
    user_id = require_user(user_id)
    question = resolve_owned_question(db, question_id, user_id)

    option = get_option(db, option_id)
    if not option or option.question_id != question.id:
        raise NotFound("Option not found.")

    db.delete(option)
    db.commit()

    logger.info("option %s deleted from question %s", option_id, question.id)
