# Lawyer schema
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.law_case import LawCase


class Lawyer(BaseModel):
    """
    A lawyer holds its own copies of cases.
    They are not linked to the standalone case store.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Caller-supplied lawyer id")
    name: str
    case_list: List[LawCase] = Field(default_factory=list, alias="caseList")
