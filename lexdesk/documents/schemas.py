from typing import Optional
from datetime import datetime

from lexdesk.models import DocumentType
from lexdesk.schemas import CamelModel, CaseBasic, ClientBasic

class DocumentCase(CaseBasic):
    client: Optional[ClientBasic] = None

class DocumentResponse(CamelModel):
    id: str
    case_id: str
    uploaded_by: Optional[str] = None
    filename: str
    mime_type: Optional[str] = None
    url: str
    file_size: Optional[int] = None
    document_type: DocumentType
    description: Optional[str] = None
    uploaded_at: Optional[datetime] = None

    # Relationships
    case: Optional[DocumentCase] = None
