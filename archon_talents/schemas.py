from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional, Union

class Found(BaseModel):
    status: Literal["found"] = "found"
    talent_string: str = Field(description="Talent string with the Wowhead prefix stripped")

class NotFound(BaseModel):
    status: Literal["not_found"] = "not_found"

class Failed(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: Literal["failed"] = "failed"
    reason: str
    cause: Optional[BaseException] = Field(None, exclude=True, description="Underlying exception, if any")

FetchOutcome = Union[Found, NotFound, Failed]
