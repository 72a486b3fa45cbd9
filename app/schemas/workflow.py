"""
app/schemas/workflow.py

Purpose: Request/response bodies for /workflows and /documents
"""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class SelectPropertyRequest(BaseModel):
    property: Optional[Any] = None


class WorkflowResponse(BaseModel):
    workflow: Dict[str, Any]


class SelectPropertyResponse(BaseModel):
    ok: bool = True
    workflow: Dict[str, Any]


class UploadResponse(BaseModel):
    ok: bool = True
    url: str


class DocumentsResponse(BaseModel):
    documents: List[Dict[str, Any]]
