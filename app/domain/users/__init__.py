"""
Users bounded context, domain layer.

This module contains the domain logic for user management:
- The User entity and partial-update merge
- Validation rules for create and update
- The repository port
"""
