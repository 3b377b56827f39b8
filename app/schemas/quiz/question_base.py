from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common.timestamps import UtcDatetime


class QuestionUpsert(BaseModel):
    id: Optional[str] = None
    order_index: int = Field(..., ge=0)
    question_text: str = Field(..., min_length=1)
    help_text: Optional[str] = None


class QuestionOut(BaseModel):
    id: str
    quiz_id: str
    order_index: int
    question_text: str
    help_text: Optional[str] = None
    created_at: UtcDatetime

    model_config = ConfigDict(from_attributes=True)
