"""
Placement Portal
REST backend for the campus placement-management application.

Architecture:
- MongoDB: companies and admin accounts
- JWT: stateless tokens for protected routes
"""

__version__ = "1.0.0"
