import logging
import os
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File, Form, Query
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session, joinedload

from lexdesk.database import get_db
from lexdesk.models import Case, Document, DocumentType, User
from lexdesk.documents.schemas import DocumentResponse
from lexdesk.documents import storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["Documents"])
uploads_router = APIRouter(prefix=storage.UPLOAD_URL_PREFIX, tags=["Documents"])


@router.get("", response_model=List[DocumentResponse])
def list_documents(
    client_id: Optional[str] = Query(None, alias="clientId"),
    case_id: Optional[str] = Query(None, alias="caseId"),
    db: Session = Depends(get_db)
):
    """List document metadata, optionally for one client or one case."""
    try:
        query = db.query(Document).options(
            joinedload(Document.case).joinedload(Case.client)
        )
        if client_id:
            query = query.filter(Document.case.has(Case.client_id == client_id))
        if case_id:
            query = query.filter(Document.case_id == case_id)
        return query.order_by(Document.uploaded_at.desc()).all()
    except Exception:
        logger.exception("Failed to fetch documents")
        raise HTTPException(status_code=500, detail="Failed to fetch documents")


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    file: Optional[UploadFile] = File(None),
    case_id: Optional[str] = Form(None, alias="caseId"),
    document_type: DocumentType = Form(DocumentType.OTHER, alias="documentType"),
    description: Optional[str] = Form(None),
    uploaded_by: Optional[str] = Form(None, alias="uploadedBy"),
    db: Session = Depends(get_db)
):
    """Upload a file and attach it to a case."""
    if not case_id or file is None or not file.filename:
        raise HTTPException(status_code=400, detail="caseId and file are required")

    if not db.query(Case.id).filter(Case.id == case_id).first():
        raise HTTPException(status_code=404, detail="Case not found")
    if uploaded_by and not db.query(User.id).filter(User.id == uploaded_by).first():
        raise HTTPException(status_code=404, detail="User not found")

    stored_path = None
    try:
        stored_name, file_size = await storage.save_upload(file)
        stored_path = storage.upload_dir() / stored_name

        document = Document(
            case_id=case_id,
            uploaded_by=uploaded_by,
            filename=storage.safe_original_name(file.filename),
            stored_name=stored_name,
            mime_type=storage.guess_upload_mime_type(file),
            url=f"{storage.UPLOAD_URL_PREFIX}/{stored_name}",
            file_size=file_size,
            document_type=document_type,
            description=description,
        )
        db.add(document)
        db.commit()
    except Exception:
        db.rollback()
        if stored_path is not None and stored_path.exists():
            os.remove(stored_path)
        logger.exception(f"Failed to upload document for case {case_id}")
        raise HTTPException(status_code=500, detail="Failed to upload document")

    logger.info(f"Stored {stored_name} ({file_size} bytes) for case {case_id}")

    # Load relationships for response
    return db.query(Document).options(
        joinedload(Document.case).joinedload(Case.client)
    ).filter(Document.id == document.id).first()


@uploads_router.get("/{filename}")
def download_upload(filename: str):
    """Stream a stored file back with a content type taken from its extension."""
    path = storage.resolve_stored_file(filename)
    if path is None:
        raise HTTPException(status_code=404, detail="File not found")
    content_type = storage.content_type_for(filename)
    return FileResponse(
        path,
        media_type=content_type,
        # Starlette appends a charset to text/* media types unless the header is given
        headers={"content-type": content_type},
        filename=filename,
        content_disposition_type="inline",
    )
