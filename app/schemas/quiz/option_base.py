from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common.timestamps import UtcDatetime


class OptionUpsert(BaseModel):
    id: Optional[str] = None
    order_index: int = Field(..., ge=0)
    option_text: str = Field(..., min_length=1)
    # type id -> score; keys are not checked against the quiz's types
    type_scores: Optional[Dict[str, float]] = None


class OptionOut(BaseModel):
    id: str
    question_id: str
    order_index: int
    option_text: str
    type_scores: Optional[Dict[str, float]] = None
    created_at: UtcDatetime

    model_config = ConfigDict(from_attributes=True)
