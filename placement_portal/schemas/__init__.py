"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: Stored document layout (what goes into MongoDB)
- Schemas: API contract (what client sends/receives)
"""

from placement_portal.schemas.schemas import (
    CompanyCreate, CompanyUpdate, CompanyResponse, CompanyDataResponse, CompanyListResponse,
    AdminRegisterRequest, AdminLoginRequest, AdminResponse, AdminLoginResponse, MessageResponse
)
