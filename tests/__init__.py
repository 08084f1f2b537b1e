"""Test suite for the bank accounts service.

Test structure:
- unit/: Unit tests - domain, store, service, config, logging, error mapping
- api/: API endpoint tests - HTTP layer through FastAPI TestClient
"""
