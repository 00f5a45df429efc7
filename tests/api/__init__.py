"""API tests for the locally hosted handler.

Requests go through FastAPI's TestClient into the catch-all route, which
builds an API Gateway proxy event and invokes the real Lambda handler. No
part of the handler is mocked; these tests cover the complete
request/response cycle: status codes, the JSON content type, error bodies
and byte-stable success bodies.
"""
