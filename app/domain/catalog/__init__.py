"""
Catalog bounded context: domain layer.

This module contains all domain logic for the product catalog:
- Product entities and their create/update shapes
- Payload validation rules
- Storage port and storage error taxonomy
- Badge and XP rewards
"""
