"""
User Management Module

User CRUD with clear separation of concerns:
- domain: User model and user errors
- repositories: Data access
- services: Validation and business rules
- api: REST API endpoints
"""
