"""
Infrastructure adapters for the catalog bounded context.

Each adapter implements the ProductRepository port:
- Airtable (remote table over its REST API)
- In-memory map (demos and tests)
"""
