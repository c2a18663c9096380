"""
Application layer for the catalog bounded context.

Use cases coordinate domain entities and the product repository port
to fulfill CRUD operations. No framework or infrastructure imports allowed.
"""
