# Law case schema
from pydantic import BaseModel, Field


class LawCase(BaseModel):
    id: int = Field(..., description="Caller-supplied case id")
    name: str
