"""
app/api/workflows.py

Purpose: Authenticated workflow and document endpoints

- Read the caller's workflow
- Select a property
- Upload a document for a workflow step
- List uploaded documents
"""

import asyncio

from fastapi import APIRouter, Body, Depends, File, Request, UploadFile
from typing import Optional

from app.api.dependencies import get_current_user
from app.db.memory import MemoryStore, get_store
from app.models.user import User
from app.schemas.workflow import (
    DocumentsResponse,
    SelectPropertyRequest,
    SelectPropertyResponse,
    UploadResponse,
    WorkflowResponse,
)
from app.services import workflow_service
from app.services.upload_service import save_upload

router = APIRouter()


@router.get("/workflows", response_model=WorkflowResponse)
async def read_workflow(
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store)
):
    workflow = workflow_service.get_workflow(store, user.id)
    return {"workflow": workflow.public()}


@router.post("/workflows/select", response_model=SelectPropertyResponse)
async def select_property(
    payload: Optional[SelectPropertyRequest] = Body(None),
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store)
):
    if payload is not None and "property" in payload.model_fields_set:
        workflow = workflow_service.select_property(store, user.id, payload.property)
    else:
        workflow = workflow_service.clear_selection(store, user.id)
    return {"ok": True, "workflow": workflow.public()}


@router.post("/workflows/{step}/upload", response_model=UploadResponse)
async def upload_document(
    step: str,
    request: Request,
    file: Optional[UploadFile] = File(None),
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store)
):
    """
    Stores the multipart "file" field and records it on the workflow.
    The returned URL is served by the /uploads static mount.
    The disk write runs in a worker thread so other requests keep flowing.
    """
    document = await asyncio.to_thread(
        save_upload,
        store,
        user.id,
        step,
        original_name=file.filename if file else None,
        fileobj=file.file if file else None,
        scheme=request.url.scheme,
        host=request.headers.get("host", request.url.netloc),
    )
    return {"ok": True, "url": document.url}


@router.get("/documents", response_model=DocumentsResponse)
async def read_documents(
    user: User = Depends(get_current_user),
    store: MemoryStore = Depends(get_store)
):
    documents = workflow_service.list_documents(store, user.id)
    return {"documents": [doc.model_dump(by_alias=True) for doc in documents]}
