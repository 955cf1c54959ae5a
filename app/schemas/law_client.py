# Law client schema
from pydantic import BaseModel, Field


class LawClient(BaseModel):
    id: int = Field(..., description="Caller-supplied client id")
    name: str
