"""
app/services/upload_service.py

Purpose: Workflow document uploads

- Writes the uploaded bytes under the uploads directory
- Builds the public /uploads URL for the stored file
- Records the document on the user's workflow after a successful write
"""

import shutil
from pathlib import Path
from typing import BinaryIO, Optional

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.core.logging import get_logger, LogContext
from app.db.memory import MemoryStore
from app.models.workflow import Document
from app.services.workflow_service import add_document
from utils.time_utils import epoch_millis, utc_now_iso
from utils.validation_utils import sanitize_filename

logger = get_logger(__name__)

UPLOADS_ROUTE = "/uploads"


def get_uploads_dir() -> Path:
    return Path(settings.UPLOADS_DIR).resolve()


def ensure_uploads_dir() -> Path:
    """Creates the uploads directory if it does not exist."""
    uploads_dir = get_uploads_dir()
    uploads_dir.mkdir(parents=True, exist_ok=True)
    return uploads_dir


def build_stored_filename(original_name: str) -> str:
    """
    Timestamp-prefixed, whitespace-free filename.
    Two uploads of the same name in the same millisecond would collide.
    """
    return f"{epoch_millis()}-{sanitize_filename(original_name)}"


def build_public_url(scheme: str, host: str, stored_filename: str) -> str:
    return f"{scheme}://{host}{UPLOADS_ROUTE}/{stored_filename}"


def save_upload(
    store: MemoryStore,
    user_id: str,
    step: str,
    original_name: Optional[str],
    fileobj: Optional[BinaryIO],
    scheme: str,
    host: str,
    uploads_dir: Optional[Path] = None
) -> Document:
    """
    Stores an uploaded file and appends a Document to the user's workflow.

    Args:
        store: Application store
        user_id: Owner of the workflow
        step: Workflow step label from the route
        original_name: Filename as sent by the client
        fileobj: Readable binary stream with the file contents
        scheme: Request scheme used for the public URL
        host: Request Host header used for the public URL

    Returns:
        The recorded Document

    Raises:
        ValidationError: If no file was sent
    """
    if fileobj is None or not original_name:
        raise ValidationError("No file uploaded")

    uploads_dir = uploads_dir or ensure_uploads_dir()
    stored_filename = build_stored_filename(original_name)
    target = uploads_dir / stored_filename

    with LogContext(user_id=user_id, step=step, stored_filename=stored_filename):
        with open(target, "wb") as buffer:
            shutil.copyfileobj(fileobj, buffer)

        document = Document(
            name=original_name,
            url=build_public_url(scheme, host, stored_filename),
            step=step,
            uploaded_at=utc_now_iso(),
        )
        add_document(store, user_id, document)

        logger.info("Document uploaded")

    return document
