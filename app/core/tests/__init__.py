"""
Tests for core infrastructure.

This package contains test modules for:
- test_responses.py: Response body helpers
- test_exceptions.py: DRF exception reshaping
- test_services.py: ServiceResult and BaseService
- test_health.py: Health check endpoint
"""
