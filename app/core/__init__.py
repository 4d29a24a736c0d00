"""
Core Application - Infrastructure & Base Classes

This app contains the domain-agnostic building blocks shared by the
authentication and chat apps.

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Services (import from core.services):
    - BaseService: Base class for service layer (logging, transactions)
    - ServiceResult: Standard result wrapper for success/failure handling

Exceptions (import from core.exceptions):
    - api_exception_handler: DRF exception handler producing {"message": ...}

Responses (import from core.responses):
    - generic_response: {"message": ...} body
    - error_response: {"errors": [...]} body
    - form_errors: Flatten serializer errors into [{"message", "field"}]

Views (import from core.views):
    - health_check: Liveness/readiness probe

OpenAPI (import from core.openapi):
    - group_endpoints: drf-spectacular postprocessing hook
"""
