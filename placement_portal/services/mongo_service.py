"""
MongoDB Service - CRUD operations for the placement collections.

Collections in this database:
1. companies - recruiters, unique by name
2. admins    - placement-cell accounts, unique by e-mail

Each service wraps one pymongo Collection. Pass a collection explicitly to
point a service somewhere else (another database, a test double).
"""

from datetime import datetime, timezone
from typing import Optional, List
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.collection import Collection

from placement_portal.db.mongodb import get_collection, COLLECTIONS
from placement_portal.models import CompanyDocument, AdminDocument


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def _now() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================
# COMPANIES COLLECTION
# ============================================================

class CompanyService:
    """
    Handles company document storage.

    Lookups are by name; the store identity (_id) is only reported back.
    """

    def __init__(self, collection: Collection = None):
        if collection is None:
            collection = get_collection(COLLECTIONS["companies"])
        self.collection: Collection = collection

    def list_all(self) -> List[dict]:
        """All companies, unfiltered, in store order."""
        return serialize_docs(list(self.collection.find()))

    def get_by_name(self, name: str) -> Optional[dict]:
        """Fetch one company by exact name."""
        return serialize_doc(self.collection.find_one({"name": name}))

    def insert(self, company: CompanyDocument) -> dict:
        """
        Persist a validated company.

        Returns the stored document including _id, createdAt and updatedAt.
        Raises pymongo DuplicateKeyError if the unique name index rejects it.
        """
        doc = company.to_document()
        now = _now()
        doc["createdAt"] = now
        doc["updatedAt"] = now
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    def update(self, name: str, changes: dict) -> Optional[dict]:
        """Apply field changes to the named company. Returns None if it does not exist."""
        changes = dict(changes)
        changes["updatedAt"] = _now()
        doc = self.collection.find_one_and_update(
            {"name": name},
            {"$set": changes},
            return_document=ReturnDocument.AFTER
        )
        return serialize_doc(doc)

    def delete(self, name: str) -> bool:
        """Remove the named company. True if a document was deleted."""
        result = self.collection.delete_one({"name": name})
        return result.deleted_count > 0


# ============================================================
# ADMINS COLLECTION
# ============================================================

class AdminService:
    """Handles admin account storage. Password hashes stay inside this layer's callers."""

    def __init__(self, collection: Collection = None):
        if collection is None:
            collection = get_collection(COLLECTIONS["admins"])
        self.collection: Collection = collection

    def get_by_email(self, email: str) -> Optional[dict]:
        return serialize_doc(self.collection.find_one({"email": email}))

    def get_by_id(self, admin_id: str) -> Optional[dict]:
        """Fetch admin by ObjectId string; malformed ids simply find nothing."""
        if not admin_id:
            return None
        try:
            oid = ObjectId(admin_id)
        except (InvalidId, TypeError):
            return None
        return serialize_doc(self.collection.find_one({"_id": oid}))

    def insert(self, admin: AdminDocument) -> dict:
        doc = admin.to_document()
        now = _now()
        doc["createdAt"] = now
        doc["updatedAt"] = now
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)


# ============================================================
# FASTAPI DEPENDENCIES
# ============================================================

def get_company_service() -> CompanyService:
    return CompanyService()


def get_admin_service() -> AdminService:
    return AdminService()
