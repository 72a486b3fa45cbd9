"""
app/models/workflow.py

Purpose: Per-user workflow state

- Selected property (opaque JSON, never validated)
- Append-only list of uploaded documents
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    url: str
    step: str
    uploaded_at: str = Field(alias="uploadedAt")


class Workflow(BaseModel):
    steps: List[str] = Field(default_factory=list)
    documents: List[Document] = Field(default_factory=list)
    selected_property: Optional[Any] = None
    # False until a select request carried a "property" field, even a null one
    property_selected: bool = False

    def public(self) -> Dict[str, Any]:
        """
        Client view of the workflow.

        selectedProperty is omitted until a property has been chosen, so a
        fresh workflow renders as {"steps": [], "documents": []}. An explicit
        null selection is echoed as "selectedProperty": null.
        """
        data: Dict[str, Any] = {
            "steps": list(self.steps),
            "documents": [doc.model_dump(by_alias=True) for doc in self.documents],
        }
        if self.property_selected:
            data["selectedProperty"] = self.selected_property
        return data
