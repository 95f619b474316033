"""
Service layer abstraction.

Each service encapsulates the lookup logic for a domain.  Handlers call
services and never touch the underlying data directly.
"""
