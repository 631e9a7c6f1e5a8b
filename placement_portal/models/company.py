"""Company document stored in the `companies` collection."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class CompanyDocument(BaseModel):
    """
    A recruiting company.

    Only `name` is required. Location, positions and eligibility criteria may
    be filled in later through an update.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    location: Optional[str] = None
    # Role records are free-form, e.g. {"title": "SDE", "ctc": 12}
    positions: List[Dict[str, Any]] = Field(default_factory=list)
    eligibility_criteria: List[str] = Field(default_factory=list, alias="eligibilityCriteria")

    def to_document(self) -> dict:
        """Dict in the stored (camelCase) layout, without store-managed fields."""
        return self.model_dump(by_alias=True)
