"""Pydantic schemas for the projects API"""
from pydantic import BaseModel, Field
from typing import Any, Optional


class Project(BaseModel):
    """A stored project record"""

    id: str = Field(description="Identifier generated by the store (UUID4 text)")
    # Stored exactly as submitted; creation does not validate these
    name: Optional[Any] = Field(default=None, description="Project name")
    owner: Optional[Any] = Field(default=None, description="Responsible party")

    class Config:
        json_schema_extra = {
            "examples": [
                {
                    "id": "0b6f2a52-5d0e-4f5e-9d1c-2f0e5c6b7a81",
                    "name": "Projeto1",
                    "owner": "Tobias"
                }
            ]
        }


class ErrorResponse(BaseModel):
    error: str = Field(description="Human-readable error message")
