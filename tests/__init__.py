# tests/__init__.py
"""
Test suite for the Pharmacy HTTP API.

Organization:
- top level: repository, service and configuration tests against an
  in-memory SQLite store.
- `http_api`: endpoint tests through FastAPI's TestClient.
"""
