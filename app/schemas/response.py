from pydantic import BaseModel
from typing import Optional, Any, List

class ErrorResponse(BaseModel):
    """
    Error body shared by every failing route.
    """
    error: str
    code: str
    details: Optional[Any] = None

class ListingsResponse(BaseModel):
    results: List[Any]
