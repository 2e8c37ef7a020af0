from pydantic import BaseModel, ConfigDict
from typing import Any, Optional

class User(BaseModel):
    # Fields are untyped and unknown keys are kept, so any JSON object is stored as posted
    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = None
    email: Optional[Any] = None
    firstName: Optional[Any] = None
    lastName: Optional[Any] = None
