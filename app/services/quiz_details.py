from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.models.quiz_db.option_db import PersonalityOption
from app.models.quiz_db.quiz_crud import get_options_by_questions, get_questions_by_quiz, get_types_by_quiz
from app.schemas.quiz.option_base import OptionOut
from app.schemas.quiz.question_base import QuestionOut
from app.schemas.quiz.quiz_base import QuestionWithOptions, QuizDetails, QuizOut
from app.schemas.quiz.type_base import PersonalityTypeOut
from app.services.quiz_access import require_user, resolve_accessible


def get_quiz_with_details(db: Session, user_id: Optional[str], quiz_id: str) -> QuizDetails:
    """Quiz plus its types, and its questions each carrying their options.

    Questions and options come back sorted by order_index; every question
    has an options list, empty when it has none.
    """
    user_id = require_user(user_id)
    quiz = resolve_accessible(db, quiz_id, user_id)

    types = get_types_by_quiz(db, quiz.id)
    questions = get_questions_by_quiz(db, quiz.id)
    options = get_options_by_questions(db, [q.id for q in questions])

    options_by_question: Dict[str, List[PersonalityOption]] = {q.id: [] for q in questions}
    for option in options:
        bucket = options_by_question.get(option.question_id)
        if bucket is not None:
            bucket.append(option)

    return QuizDetails(
        quiz=QuizOut.model_validate(quiz),
        types=[PersonalityTypeOut.model_validate(t) for t in types],
        questions=[
            QuestionWithOptions(
                **QuestionOut.model_validate(question).model_dump(),
                options=[OptionOut.model_validate(o) for o in options_by_question[question.id]],
            )
            for question in questions
        ],
    )
