"""
Infrastructure Layer

Concrete repository adapters bound to one external system each
(HTTP todo API, Postgres, S3), plus the factories that wire them.
"""
