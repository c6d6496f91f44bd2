"""Baseline practice schema

Revision ID: 4b1d7e2a9c03
Revises:
Create Date: 2026-10-19 09:12:40.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1d7e2a9c03'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("role", sa.Enum("lawyer", "assistant", name="userrole"), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_role", "users", ["role"])

    op.create_table(
        "clients",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=20), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_clients_email", "clients", ["email"], unique=True)

    op.create_table(
        "cases",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("case_number", sa.String(length=50), nullable=False),
        sa.Column("client_id", sa.String(length=36), sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("assigned_lawyer_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("case_type", sa.Enum("criminal", "civil", "corporate", "family", "other", name="casetype"), nullable=False),
        sa.Column("status", sa.Enum("active", "pending", "closed", "archived", name="casestatus"), nullable=False),
        sa.Column("priority", sa.Enum("low", "medium", "high", "urgent", name="prioritylevel"), nullable=False),
        sa.Column("filing_date", sa.Date(), nullable=True),
        sa.Column("closure_date", sa.Date(), nullable=True),
        sa.Column("court_name", sa.String(length=255), nullable=True),
        sa.Column("opposing_party", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_cases_case_number", "cases", ["case_number"], unique=True)
    op.create_index("ix_cases_client_id", "cases", ["client_id"])
    op.create_index("ix_cases_assigned_lawyer_id", "cases", ["assigned_lawyer_id"])
    op.create_index("ix_cases_status", "cases", ["status"])

    op.create_table(
        "appointments",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("datetime", sa.DateTime(), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("type", sa.Enum("client", "lawyer", name="appointmenttype"), nullable=False),
        sa.Column(
            "status",
            sa.Enum("scheduled", "confirmed", "completed", "cancelled", "no_show", name="appointmentstatus"),
            nullable=False,
        ),
        sa.Column("case_id", sa.String(length=36), sa.ForeignKey("cases.id"), nullable=True),
        sa.Column("client_id", sa.String(length=36), sa.ForeignKey("clients.id"), nullable=True),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_appointments_datetime", "appointments", ["datetime"])
    op.create_index("ix_appointments_type", "appointments", ["type"])
    op.create_index("ix_appointments_status", "appointments", ["status"])
    op.create_index("ix_appointments_case_id", "appointments", ["case_id"])
    op.create_index("ix_appointments_client_id", "appointments", ["client_id"])
    op.create_index("ix_appointments_user_id", "appointments", ["user_id"])

    op.create_table(
        "documents",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("case_id", sa.String(length=36), sa.ForeignKey("cases.id"), nullable=False),
        sa.Column("uploaded_by", sa.String(length=36), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("filename", sa.String(length=255), nullable=False),
        sa.Column("stored_name", sa.String(length=300), nullable=False),
        sa.Column("mime_type", sa.String(length=100), nullable=True),
        sa.Column("url", sa.String(length=500), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=True),
        sa.Column(
            "document_type",
            sa.Enum("contract", "evidence", "pleading", "correspondence", "court_order", "other", name="documenttype"),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("uploaded_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_documents_case_id", "documents", ["case_id"])

    op.create_table(
        "billings",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("invoice_number", sa.String(length=50), nullable=False),
        sa.Column("case_id", sa.String(length=36), sa.ForeignKey("cases.id"), nullable=False),
        sa.Column("amount_cents", sa.Integer(), nullable=False),
        sa.Column("tax_cents", sa.Integer(), nullable=False),
        sa.Column("total_cents", sa.Integer(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("draft", "sent", "paid", "overdue", "cancelled", name="billingstatus"),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("issue_date", sa.Date(), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_billings_invoice_number", "billings", ["invoice_number"], unique=True)
    op.create_index("ix_billings_case_id", "billings", ["case_id"])
    op.create_index("ix_billings_status", "billings", ["status"])

    op.create_table(
        "payments",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("billing_id", sa.String(length=36), sa.ForeignKey("billings.id"), nullable=False),
        sa.Column("amount_cents", sa.Integer(), nullable=False),
        sa.Column(
            "method",
            sa.Enum("cash", "check", "bank_transfer", "credit_card", "online", name="paymentmethod"),
            nullable=False,
        ),
        sa.Column(
            "status",
            sa.Enum("pending", "completed", "failed", "refunded", name="paymentstatus"),
            nullable=False,
        ),
        sa.Column("transaction_reference", sa.String(length=100), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("payment_date", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_payments_billing_id", "payments", ["billing_id"])


def downgrade():
    op.drop_table("payments")
    op.drop_table("billings")
    op.drop_table("documents")
    op.drop_table("appointments")
    op.drop_table("cases")
    op.drop_table("clients")
    op.drop_table("users")
    for name in (
        "paymentstatus", "paymentmethod", "billingstatus", "documenttype",
        "appointmentstatus", "appointmenttype", "prioritylevel", "casestatus",
        "casetype", "userrole",
    ):
        sa.Enum(name=name).drop(op.get_bind(), checkfirst=True)
