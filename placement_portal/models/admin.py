"""Admin document stored in the `admins` collection."""

from pydantic import BaseModel, EmailStr, Field


class AdminDocument(BaseModel):
    name: str = Field(..., min_length=1)
    designation: str = Field(..., min_length=1)
    email: EmailStr
    password_hash: str = Field(..., min_length=1)
    role: str = "admin"

    def to_document(self) -> dict:
        return self.model_dump()
