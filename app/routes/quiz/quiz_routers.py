from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import get_current_user_id
from app.schemas.common.action_response import ActionResponse, CreatedId, ItemsResponse
from app.schemas.quiz.question_base import QuestionUpsert
from app.schemas.quiz.quiz_base import QuizCreate, QuizDetails, QuizOut, QuizUpdate
from app.schemas.quiz.result_base import QuizResultCreate, QuizResultOut
from app.schemas.quiz.type_base import PersonalityTypeUpsert
from app.services import quiz_service
from app.services.quiz_details import get_quiz_with_details
from app.services.quiz_results import list_my_results, record_quiz_result

quiz_router = APIRouter(prefix="/quizzes", tags=["Quizzes"])
result_router = APIRouter(prefix="/results", tags=["Results"])


@quiz_router.post("", response_model=ActionResponse[CreatedId], status_code=201)
def create_quiz(
    quiz_in: QuizCreate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    quiz_id = quiz_service.create_quiz(db, user_id, quiz_in)
    return ActionResponse(data=CreatedId(id=quiz_id))


@quiz_router.get("/mine", response_model=ActionResponse[ItemsResponse[QuizOut]])
def list_my_quizzes(
    include_inactive: bool = Query(False),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    quizzes = quiz_service.list_my_quizzes(db, user_id, include_inactive=include_inactive)
    items: List[QuizOut] = [QuizOut.model_validate(q) for q in quizzes]
    return ActionResponse(data=ItemsResponse[QuizOut](items=items, total=len(items)))


@quiz_router.get("/{quiz_id}", response_model=ActionResponse[QuizDetails])
def get_quiz(
    quiz_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    return ActionResponse(data=get_quiz_with_details(db, user_id, quiz_id))


@quiz_router.put("/{quiz_id}", response_model=ActionResponse)
def update_quiz(
    quiz_id: str,
    quiz_in: QuizUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    quiz_service.update_quiz(db, user_id, quiz_id, quiz_in)
    return ActionResponse()


@quiz_router.post("/{quiz_id}/archive", response_model=ActionResponse)
def archive_quiz(
    quiz_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    quiz_service.archive_quiz(db, user_id, quiz_id)
    return ActionResponse()


@quiz_router.post("/{quiz_id}/types", response_model=ActionResponse[CreatedId])
def upsert_personality_type(
    quiz_id: str,
    type_in: PersonalityTypeUpsert,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    type_id = quiz_service.upsert_personality_type(db, user_id, quiz_id, type_in)
    return ActionResponse(data=CreatedId(id=type_id))


@quiz_router.delete("/{quiz_id}/types/{type_id}", response_model=ActionResponse)
def delete_personality_type(
    quiz_id: str,
    type_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    quiz_service.delete_personality_type(db, user_id, type_id, quiz_id)
    return ActionResponse()


@quiz_router.post("/{quiz_id}/questions", response_model=ActionResponse[CreatedId])
def upsert_question(
    quiz_id: str,
    question_in: QuestionUpsert,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    question_id = quiz_service.upsert_question(db, user_id, quiz_id, question_in)
    return ActionResponse(data=CreatedId(id=question_id))


@quiz_router.delete("/{quiz_id}/questions/{question_id}", response_model=ActionResponse)
def delete_question(
    quiz_id: str,
    question_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    quiz_service.delete_question(db, user_id, question_id, quiz_id)
    return ActionResponse()


@quiz_router.post("/{quiz_id}/results", response_model=ActionResponse[CreatedId], status_code=201)
def create_quiz_result(
    quiz_id: str,
    result_in: QuizResultCreate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    result_id = record_quiz_result(
        db,
        user_id,
        quiz_id,
        dominant_type_id=result_in.dominant_type_id,
        result_summary=result_in.result_summary,
        scores=result_in.scores,
    )
    return ActionResponse(data=CreatedId(id=result_id))


@result_router.get("/mine", response_model=ActionResponse[ItemsResponse[QuizResultOut]])
def get_my_results(
    quiz_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    results = list_my_results(db, user_id, quiz_id)
    items = [QuizResultOut.model_validate(r) for r in results]
    return ActionResponse(data=ItemsResponse[QuizResultOut](items=items, total=len(items)))
