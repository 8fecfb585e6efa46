"""
Service layer abstraction.

``BookService`` encapsulates the business logic for books on top of
the in‑memory ``BookStore``.  Validation rules live in ``validation``
and are pure functions with no access to the store.
"""
