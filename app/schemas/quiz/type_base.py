from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common.timestamps import UtcDatetime


class PersonalityTypeUpsert(BaseModel):
    id: Optional[str] = None
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class PersonalityTypeOut(BaseModel):
    id: str
    quiz_id: str
    code: str
    name: str
    description: Optional[str] = None
    created_at: UtcDatetime

    model_config = ConfigDict(from_attributes=True)
