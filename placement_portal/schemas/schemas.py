"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Field names follow the stored camelCase layout on the wire
(eligibilityCriteria, createdAt); snake_case names are accepted on input too.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional, List, Dict, Any
from datetime import datetime


# ============================================================
# COMPANY SCHEMAS
# ============================================================

class CompanyCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Optional here so a missing name reaches the handler and gets its own message
    name: Optional[str] = None
    location: Optional[str] = None
    positions: Optional[List[Dict[str, Any]]] = None
    eligibility_criteria: Optional[List[str]] = Field(None, alias="eligibilityCriteria")

class CompanyUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    location: Optional[str] = None
    positions: Optional[List[Dict[str, Any]]] = None
    eligibility_criteria: Optional[List[str]] = Field(None, alias="eligibilityCriteria")

class CompanyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    location: Optional[str] = None
    positions: List[Dict[str, Any]] = []
    eligibility_criteria: List[str] = Field(default_factory=list, alias="eligibilityCriteria")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

class CompanyDataResponse(BaseModel):
    data: CompanyResponse

class CompanyListResponse(BaseModel):
    data: List[CompanyResponse]


# ============================================================
# ADMIN AUTH SCHEMAS
# ============================================================

class AdminRegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    designation: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)

class AdminLoginRequest(BaseModel):
    email: EmailStr
    password: str

class AdminResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    designation: str
    email: str
    role: str = "admin"
    created_at: Optional[datetime] = Field(None, alias="createdAt")

class AdminSummary(BaseModel):
    id: str
    name: str
    email: str
    designation: str

class AdminLoginResponse(BaseModel):
    message: str
    token: str
    admin: AdminSummary


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
