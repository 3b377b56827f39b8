from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.common.timestamps import UtcDatetime


class QuizResultCreate(BaseModel):
    dominant_type_id: Optional[str] = None
    result_summary: Optional[str] = None
    scores: Optional[Dict[str, float]] = None


class QuizResultOut(BaseModel):
    id: str
    quiz_id: str
    user_id: str
    dominant_type_id: Optional[str] = None
    result_summary: Optional[str] = None
    scores: Optional[Dict[str, float]] = None
    created_at: UtcDatetime

    model_config = ConfigDict(from_attributes=True)
