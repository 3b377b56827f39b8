from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common.timestamps import UtcDatetime
from app.schemas.quiz.question_base import QuestionOut
from app.schemas.quiz.option_base import OptionOut
from app.schemas.quiz.type_base import PersonalityTypeOut


class QuizBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    language: Optional[str] = None


class QuizCreate(QuizBase):
    pass


class QuizUpdate(QuizBase):
    is_active: Optional[bool] = None


class QuizOut(QuizBase):
    id: str
    user_id: Optional[str] = None
    is_system: bool
    is_active: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime

    model_config = ConfigDict(from_attributes=True)


class QuestionWithOptions(QuestionOut):
    options: List[OptionOut] = Field(default_factory=list)


class QuizDetails(BaseModel):
    quiz: QuizOut
    types: List[PersonalityTypeOut]
    questions: List[QuestionWithOptions]
