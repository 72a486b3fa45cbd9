"""
app/services/workflow_service.py

Purpose: Per-user workflow state

- Lazily creates a workflow on first access
- Stores the selected property without validating it
- Appends documents in upload order
"""

from typing import Any, List

from app.core.logging import get_logger, LogContext
from app.db.memory import MemoryStore
from app.models.workflow import Document, Workflow

logger = get_logger(__name__)


def get_workflow(store: MemoryStore, user_id: str) -> Workflow:
    """Returns the user's workflow, creating an empty one if needed."""
    return store.ensure_workflow(user_id)


def select_property(store: MemoryStore, user_id: str, property_payload: Any) -> Workflow:
    """
    Sets the workflow's selected property to the given opaque payload.

    Returns:
        The updated workflow
    """
    with store.lock:
        workflow = store.ensure_workflow(user_id)
        workflow.selected_property = property_payload
        workflow.property_selected = True

    with LogContext(user_id=user_id):
        logger.info("Property selected")

    return workflow


def clear_selection(store: MemoryStore, user_id: str) -> Workflow:
    """Forgets the selected property; used when a select request has no property field."""
    with store.lock:
        workflow = store.ensure_workflow(user_id)
        workflow.selected_property = None
        workflow.property_selected = False
    return workflow


def list_documents(store: MemoryStore, user_id: str) -> List[Document]:
    workflow = store.get_workflow(user_id)
    if workflow is None:
        return []
    return list(workflow.documents)


def add_document(store: MemoryStore, user_id: str, document: Document) -> Workflow:
    with store.lock:
        workflow = store.ensure_workflow(user_id)
        workflow.documents.append(document)
    return workflow
