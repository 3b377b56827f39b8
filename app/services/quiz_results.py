import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.core.errors import BadRequest
from app.models.quiz_db.quiz_crud import get_results_by_user, get_type
from app.models.quiz_db.quiz_db import new_id, utcnow
from app.models.quiz_db.result_db import PersonalityQuizResult
from app.models.quiz_db.scores import encode_scores
from app.services.quiz_access import require_user, resolve_accessible

logger = logging.getLogger(__name__)


def record_quiz_result(
    db: Session,
    user_id: Optional[str],
    quiz_id: str,
    dominant_type_id: Optional[str] = None,
    result_summary: Optional[str] = None,
    scores: Optional[Dict[str, float]] = None,
) -> str:
    """Store a result computed by the caller. Nothing is scored here."""
    user_id = require_user(user_id)
    quiz = resolve_accessible(db, quiz_id, user_id)

    if dominant_type_id:
        personality_type = get_type(db, dominant_type_id)
        if not personality_type or personality_type.quiz_id != quiz.id:
            logger.warning("rejected dominant type %s for quiz %s", dominant_type_id, quiz.id)
            raise BadRequest("Dominant type does not belong to quiz.")

    result = PersonalityQuizResult(
        id=new_id(),
        quiz_id=quiz.id,
        user_id=user_id,
        dominant_type_id=dominant_type_id or None,
        result_summary=result_summary,
        scores_json=encode_scores(scores),
        created_at=utcnow(),
    )
    db.add(result)
    db.commit()

    logger.info("result %s recorded for quiz %s by %s", result.id, quiz.id, user_id)
    return result.id


def list_my_results(
    db: Session, user_id: Optional[str], quiz_id: Optional[str] = None
) -> List[PersonalityQuizResult]:
    user_id = require_user(user_id)
    return get_results_by_user(db, user_id, quiz_id)
