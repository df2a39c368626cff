"""
API Layer - FastAPI Presentation Layer

Responsibility:
    HTTP interface for the application. Validates requests, starts
    Trigger.dev jobs through the Application Layer and reports job status.
    No business logic.

Contains:
    - FastAPI routers (intake, generate, jobs)
    - Request/Response models (Pydantic)
    - Dependency injection and API key guard
    - Middleware configuration (CORS, logging)
"""
