"""
Hello chain data schemas

Pydantic models for the JSON bodies exchanged along the hello chain.
"""

from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field, model_validator


class ErrorResponse(BaseModel):
    """Error body returned by a service when a request fails"""
    error: str
    message: str
    upstream_status: Optional[int] = Field(None, ge=100)


class HelloPageState(str, Enum):
    """States of the hello page"""
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class HelloResult(BaseModel):
    """Outcome of one hello attempt as seen by the browser"""
    state: HelloPageState
    message: Optional[str] = None
    error: Optional[str] = None

    @model_validator(mode='after')
    def check_state_payload(self):
        """A result carries a payload only for the state that owns it"""
        if self.state == HelloPageState.SUCCESS:
            if self.message is None or self.error is not None:
                raise ValueError('success result needs a message and no error')
        elif self.state == HelloPageState.ERROR:
            if not self.error or self.message is not None:
                raise ValueError('error result needs a non-empty error and no message')
        elif self.message is not None or self.error is not None:
            raise ValueError('loading result carries no payload')
        return self
