# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Board Game Reviews API:
# - test_query_builder.py: Whitelist validation and SQL construction
# - test_services.py: Service behaviour (mock store and seeded store)
# - test_models.py: Pydantic model validation
# - test_api.py: Endpoint tests through FastAPI's TestClient
#
# Run tests with: pytest
# =============================================================================
