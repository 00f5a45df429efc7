"""Domain layer - pure request semantics.

Structure:
- value_objects/: Immutable values produced by validation
- protocols/: Ports implemented by infrastructure (logging)
- errors/: Errors specific to readiness probing and contract checks

The domain layer has NO dependencies on any framework or infrastructure.
"""
