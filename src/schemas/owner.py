"""Owner schema definitions.

This module defines the Owner and Viewer data models returned by the
credential store and the viewer membership manager. The password hash never
appears here; it stays inside the credential store.
"""

from pydantic import BaseModel, Field


class Viewer(BaseModel):
    name: str = Field(description="Display name the family member joined with.")
    joined_at: str = Field(description="When the viewer joined (ISO format).")


class Owner(BaseModel):
    owner_id: str = Field(description="The unique identifier of the owner.", frozen=True)
    username: str = Field(description="Unique, case-sensitive login name.")
    access_code: str = Field(
        description="Shareable code that grants read-only access.", frozen=True
    )
    created_at: str = Field(description="When the owner registered (ISO format).")
