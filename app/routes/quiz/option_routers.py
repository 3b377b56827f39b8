from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import get_current_user_id
from app.schemas.common.action_response import ActionResponse, CreatedId
from app.schemas.quiz.option_base import OptionUpsert
from app.services import quiz_service

option_router = APIRouter(prefix="/questions", tags=["Options"])


@option_router.post("/{question_id}/options", response_model=ActionResponse[CreatedId])
def upsert_option(
    question_id: str,
    option_in: OptionUpsert,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    option_id = quiz_service.upsert_option(db, user_id, question_id, option_in)
    return ActionResponse(data=CreatedId(id=option_id))


@option_router.delete("/{question_id}/options/{option_id}", response_model=ActionResponse)
def delete_option(
    question_id: str,
    option_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    quiz_service.delete_option(db, user_id, option_id, question_id)
    return ActionResponse()
