# storerating/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Default admin creation on first startup
- db: Database configuration and connection management
- errors: Error taxonomy and the handlers that render it
- security: Roles, password hashing and session tokens
"""
