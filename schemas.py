# schemas.py

from typing import Optional
from pydantic import BaseModel

# STATE

class TransformationState(BaseModel):
    input: Optional[str] = None
    output: Optional[str] = None
    loading: bool = False
    error: Optional[str] = None


# RESPONSE SCHEMAS

class HealthResponse(BaseModel):
    ok: bool
