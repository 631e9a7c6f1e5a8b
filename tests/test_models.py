"""Tests for stored document shapes."""

import pytest
from pydantic import ValidationError

from placement_portal.models import AdminDocument, CompanyDocument


class TestCompanyDocument:
    def test_name_only(self) -> None:
        c = CompanyDocument(name="Acme")
        assert c.location is None
        assert c.positions == []
        assert c.eligibility_criteria == []

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            CompanyDocument(location="Pune")
        with pytest.raises(ValidationError):
            CompanyDocument(name="")

    def test_field_types_enforced(self) -> None:
        with pytest.raises(ValidationError):
            CompanyDocument(name="Acme", eligibilityCriteria="CGPA > 7")

    def test_document_layout_is_camel_case(self) -> None:
        c = CompanyDocument.model_validate({
            "name": "Acme",
            "location": "Pune",
            "positions": [{"title": "SDE", "ctc": 12}],
            "eligibilityCriteria": ["CGPA >= 7", "No active backlogs"],
        })
        assert c.to_document() == {
            "name": "Acme",
            "location": "Pune",
            "positions": [{"title": "SDE", "ctc": 12}],
            "eligibilityCriteria": ["CGPA >= 7", "No active backlogs"],
        }


class TestAdminDocument:
    def test_valid(self) -> None:
        a = AdminDocument(name="Asha", designation="TPO", email="asha@chitkara.edu.in", password_hash="x")
        assert a.role == "admin"
        assert a.to_document()["email"] == "asha@chitkara.edu.in"

    def test_designation_required(self) -> None:
        with pytest.raises(ValidationError):
            AdminDocument(name="Asha", email="asha@chitkara.edu.in", password_hash="x")

    def test_email_validated(self) -> None:
        with pytest.raises(ValidationError):
            AdminDocument(name="Asha", designation="TPO", email="not-an-email", password_hash="x")
