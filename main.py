import logging

from decouple import config, Csv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from lexdesk.database import engine, Base
from lexdesk.errors import http_error_handler, validation_error_handler
from lexdesk.auth.routes import router as auth_router
from lexdesk.clients.routes import router as clients_router
from lexdesk.cases.routes import router as cases_router
from lexdesk.appointments.routes import router as appointments_router
from lexdesk.documents.routes import router as documents_router, uploads_router
from lexdesk.billing.routes import billings_router, payments_router
from lexdesk.dashboard.routes import router as dashboard_router

logging.basicConfig(level=config("LOG_LEVEL", default="INFO"))

# Create database tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="LexDesk API",
    description="Practice management for law offices: clients, cases, appointments, documents and billing",
    version="1.0.0"
)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config("CORS_ORIGINS", default="http://localhost:3000", cast=Csv()),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Every error leaves as {"error": "..."}
app.add_exception_handler(StarletteHTTPException, http_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

# Include routers
app.include_router(auth_router)
app.include_router(clients_router)
app.include_router(cases_router)
app.include_router(appointments_router)
app.include_router(documents_router)
app.include_router(uploads_router)
app.include_router(billings_router)
app.include_router(payments_router)
app.include_router(dashboard_router)


@app.get("/")
def root():
    return {
        "message": "LexDesk API",
        "version": "1.0.0",
        "status": "running"
    }

@app.get("/health")
def health_check():
    return {"status": "healthy"}
