"""
Models module - document shapes stored in MongoDB.

These models are used for:
- Write-time validation of required fields and types
- Converting validated data to the stored document layout
"""

from placement_portal.models.company import CompanyDocument
from placement_portal.models.admin import AdminDocument

__all__ = ["CompanyDocument", "AdminDocument"]
