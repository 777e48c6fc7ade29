"""
Service layer abstraction.

Each service encapsulates the business logic for a domain and talks
to storage only through the record store it is constructed with.
"""
