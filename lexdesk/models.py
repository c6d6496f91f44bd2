from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum, Date
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from datetime import date
from lexdesk.database import Base
import enum
import uuid

# =====================================================
# ENUMS
# =====================================================

class UserRole(str, enum.Enum):
    LAWYER = "lawyer"
    ASSISTANT = "assistant"

class CaseStatus(str, enum.Enum):
    ACTIVE = "active"
    PENDING = "pending"
    CLOSED = "closed"
    ARCHIVED = "archived"

class CaseType(str, enum.Enum):
    CRIMINAL = "criminal"
    CIVIL = "civil"
    CORPORATE = "corporate"
    FAMILY = "family"
    OTHER = "other"

class PriorityLevel(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

class AppointmentType(str, enum.Enum):
    CLIENT = "client"
    LAWYER = "lawyer"

class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"

class DocumentType(str, enum.Enum):
    CONTRACT = "contract"
    EVIDENCE = "evidence"
    PLEADING = "pleading"
    CORRESPONDENCE = "correspondence"
    COURT_ORDER = "court_order"
    OTHER = "other"

class BillingStatus(str, enum.Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"

class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    CHECK = "check"
    BANK_TRANSFER = "bank_transfer"
    CREDIT_CARD = "credit_card"
    ONLINE = "online"

class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


def _enum(enum_cls):
    # Persist the lowercase values rather than the member names
    return Enum(enum_cls, values_callable=lambda members: [m.value for m in members])

# =====================================================
# STAFF & CLIENTS
# =====================================================

class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    role = Column(_enum(UserRole), default=UserRole.LAWYER, nullable=False, index=True)
    phone = Column(String(20))
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    # Relationships
    appointments = relationship("Appointment", back_populates="user")
    documents = relationship("Document", back_populates="uploader")
    assigned_cases = relationship("Case", back_populates="assigned_lawyer")

class Client(Base):
    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255))  # Only set for clients with portal access
    phone = Column(String(20))
    address = Column(Text)
    notes = Column(Text)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    # Relationships
    cases = relationship("Case", back_populates="client")
    appointments = relationship("Appointment", back_populates="client")

# =====================================================
# CASE MANAGEMENT
# =====================================================

class Case(Base):
    __tablename__ = "cases"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    case_number = Column(String(50), unique=True, nullable=False, index=True)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False, index=True)
    assigned_lawyer_id = Column(String(36), ForeignKey("users.id"), index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    case_type = Column(_enum(CaseType), default=CaseType.OTHER, nullable=False)
    status = Column(_enum(CaseStatus), default=CaseStatus.PENDING, nullable=False, index=True)
    priority = Column(_enum(PriorityLevel), default=PriorityLevel.MEDIUM, nullable=False)
    filing_date = Column(Date, default=date.today)
    closure_date = Column(Date)
    court_name = Column(String(255))
    opposing_party = Column(String(255))
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    # Relationships
    client = relationship("Client", back_populates="cases")
    assigned_lawyer = relationship("User", back_populates="assigned_cases")
    appointments = relationship("Appointment", back_populates="case", order_by="Appointment.datetime")
    documents = relationship("Document", back_populates="case")
    billings = relationship("Billing", back_populates="case")

class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    datetime = Column(DateTime, nullable=False, index=True)
    duration_minutes = Column(Integer, default=60, nullable=False)
    location = Column(String(255))
    notes = Column(Text)
    type = Column(_enum(AppointmentType), nullable=False, index=True)
    status = Column(_enum(AppointmentStatus), default=AppointmentStatus.SCHEDULED, nullable=False, index=True)

    # Optional links, any combination may be set
    case_id = Column(String(36), ForeignKey("cases.id"), index=True)
    client_id = Column(String(36), ForeignKey("clients.id"), index=True)
    user_id = Column(String(36), ForeignKey("users.id"), index=True)

    created_at = Column(DateTime, default=func.now())

    # Relationships
    case = relationship("Case", back_populates="appointments")
    client = relationship("Client", back_populates="appointments")
    user = relationship("User", back_populates="appointments")

class Document(Base):
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    case_id = Column(String(36), ForeignKey("cases.id"), nullable=False, index=True)
    uploaded_by = Column(String(36), ForeignKey("users.id"))
    filename = Column(String(255), nullable=False)
    stored_name = Column(String(300), nullable=False)
    mime_type = Column(String(100))
    url = Column(String(500), nullable=False)
    file_size = Column(Integer)
    document_type = Column(_enum(DocumentType), default=DocumentType.OTHER, nullable=False)
    description = Column(Text)
    uploaded_at = Column(DateTime, default=func.now())

    # Relationships
    case = relationship("Case", back_populates="documents")
    uploader = relationship("User", back_populates="documents")

# =====================================================
# BILLING & PAYMENTS
# =====================================================

class Billing(Base):
    __tablename__ = "billings"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    invoice_number = Column(String(50), unique=True, nullable=False, index=True)
    case_id = Column(String(36), ForeignKey("cases.id"), nullable=False, index=True)
    amount_cents = Column(Integer, nullable=False)
    tax_cents = Column(Integer, default=0, nullable=False)
    total_cents = Column(Integer, nullable=False)
    status = Column(_enum(BillingStatus), default=BillingStatus.DRAFT, nullable=False, index=True)
    description = Column(Text)
    issue_date = Column(Date, default=date.today)
    due_date = Column(Date)
    created_at = Column(DateTime, default=func.now())

    # Relationships
    case = relationship("Case", back_populates="billings")
    payments = relationship("Payment", back_populates="billing")

    @property
    def paid_cents(self) -> int:
        return sum(p.amount_cents for p in self.payments if p.status == PaymentStatus.COMPLETED)

    @property
    def balance_cents(self) -> int:
        return self.total_cents - self.paid_cents

class Payment(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    billing_id = Column(String(36), ForeignKey("billings.id"), nullable=False, index=True)
    amount_cents = Column(Integer, nullable=False)
    method = Column(_enum(PaymentMethod), nullable=False)
    status = Column(_enum(PaymentStatus), default=PaymentStatus.COMPLETED, nullable=False)
    transaction_reference = Column(String(100))
    notes = Column(Text)
    payment_date = Column(DateTime, default=func.now())

    # Relationships
    billing = relationship("Billing", back_populates="payments")
