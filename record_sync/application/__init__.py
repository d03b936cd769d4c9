"""
Application Layer

Use cases sequence repository calls; DTOs define the public contract of
the user export use cases. No business rules live here: validation is
delegated to the domain entities.
"""
