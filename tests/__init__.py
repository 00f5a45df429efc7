"""Test suite for the full name API.

Test structure:
- unit/: Validation, response shaping, handler, client, verifier, CLI
- api/: Locally hosted handler exercised over HTTP
- contract/: Pact interactions replayed provider-side and consumer-side
"""
