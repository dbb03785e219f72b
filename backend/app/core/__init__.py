# app/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Startup database connectivity probe
- db: Database configuration and connection pool management
- errors: Error taxonomy and JSON exception handlers
- security: Password hashing and bearer token issuance/validation
"""
