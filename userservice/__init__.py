"""
User Service

Layered CRUD service for user records: FastAPI endpoints, a validating
service layer returning Results, and SQL persistence via ``databases``.
"""
