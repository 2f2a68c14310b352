"""
sso_platform_tests package

Tests for the SSO service:

- RPC facade end to end through FastAPI's TestClient (`test_auth.py`)
- Authentication service against in-memory gateways (`test_service.py`)
- SQLAlchemy persistence gateway (`test_storage.py`, `test_db_init.py`)
- Password hashing and token issuance (`test_tokens.py`)
- Configuration and logging setup (`test_config.py`, `test_logging_config.py`)
"""
