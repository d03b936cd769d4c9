"""
Domain Layer

Entities that enforce their own construction invariants, and the
repository contracts the application layer depends on. Nothing here
performs I/O.
"""
