"""
Service layer abstraction.

Services encapsulate the business logic of the registry.  Handlers
receive a service instance through a FastAPI dependency so tests can
swap in a fresh one.
"""
