"""
Starter API: a full-stack starter backend.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - users: CRUD over an in-memory user collection.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Services, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency providers.
    - shared: Cross-cutting concerns (errors, middleware, logging, rate limiting).
    - client: Typed HTTP client for the API.
"""
