"""
Authentication Routes

POST /register/admin - Register a placement-cell admin
POST /login/admin - Login and get JWT token
GET /admin/me - Get current admin info
"""

import logging

from fastapi import APIRouter, HTTPException, Depends
from pymongo.errors import DuplicateKeyError, PyMongoError

from placement_portal.core.auth import hash_password, verify_password, generate_token, require_role
from placement_portal.core.config import get_settings
from placement_portal.models import AdminDocument
from placement_portal.services.mongo_service import AdminService, get_admin_service
from placement_portal.schemas.schemas import (
    AdminRegisterRequest, AdminLoginRequest, AdminLoginResponse, AdminResponse, MessageResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])

INVALID_CREDENTIALS = "Invalid credentials"


@router.post("/register/admin", response_model=MessageResponse, status_code=201)
def register_admin(request: AdminRegisterRequest, service: AdminService = Depends(get_admin_service)):
    """
    Register a new admin account.

    After registration, login to get an access token.
    """
    settings = get_settings()
    domain = settings.admin_email_domain.strip().lower()
    if domain and not request.email.lower().endswith("@" + domain):
        raise HTTPException(status_code=400, detail=f"Admin email must end with @{domain}")

    try:
        if service.get_by_email(request.email):
            raise HTTPException(status_code=400, detail="Admin already exists")

        service.insert(AdminDocument(
            name=request.name,
            designation=request.designation,
            email=request.email,
            password_hash=hash_password(request.password)
        ))
    except DuplicateKeyError:
        raise HTTPException(status_code=400, detail="Admin already exists")
    except PyMongoError as e:
        logger.exception("Admin registration failed")
        raise HTTPException(status_code=500, detail=str(e))

    logger.info("Admin registered: %s", request.email)
    return MessageResponse(message="Admin registered successfully")


@router.post("/login/admin", response_model=AdminLoginResponse)
def login_admin(request: AdminLoginRequest, service: AdminService = Depends(get_admin_service)):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    try:
        admin = service.get_by_email(request.email)
    except PyMongoError as e:
        logger.exception("Admin lookup failed")
        raise HTTPException(status_code=500, detail=str(e))

    password_hash = admin.get("password_hash") if admin else None
    if not password_hash or not verify_password(request.password, password_hash):
        raise HTTPException(status_code=400, detail=INVALID_CREDENTIALS)

    token = generate_token(
        {"id": admin["_id"], "email": admin["email"], "role": admin.get("role", "admin")},
        get_settings().jwt_expires_in
    )

    return {
        "message": "Login successful",
        "token": token,
        "admin": {
            "id": admin["_id"],
            "name": admin["name"],
            "email": admin["email"],
            "designation": admin["designation"],
        },
    }


@router.get("/admin/me", response_model=AdminResponse)
def get_admin_me(claims: dict = Depends(require_role("admin")), service: AdminService = Depends(get_admin_service)):
    """Get the authenticated admin's account."""
    try:
        admin = service.get_by_id(claims.get("id"))
    except PyMongoError as e:
        logger.exception("Admin lookup failed")
        raise HTTPException(status_code=500, detail=str(e))

    if not admin:
        raise HTTPException(status_code=404, detail="Admin not found")
    return admin
