"""
User record model.

File: models/user.py
Author: userform contributors
Created: 2026-10-14
Last Modified: 2026-10-16
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A user's captured profile, as stored in the users table"""
    model_config = ConfigDict(
        validate_assignment=True,
        extra='ignore'
    )

    id: Optional[int] = Field(None, description="Assigned by the store on insert; None before persistence")
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Email address")
    birth_date: str = Field(..., description="Birth date as YYYY-MM-DD")
    address: str = Field(..., description="Single-line postal address")
    password: str = Field(..., description="Password, stored as plaintext")

    def to_db_dict(self) -> Dict[str, Any]:
        """Convert to dictionary keyed by column name for database insertion"""
        data = {
            "name": self.name,
            "email": self.email,
            "birthDate": self.birth_date,
            "address": self.address,
            "password": self.password,
        }
        if self.id is not None:
            data["id"] = self.id
        return data

    @classmethod
    def from_db_dict(cls, data: Dict[str, Any]) -> "User":
        """Create User instance from a row dictionary"""
        data = dict(data)
        if "birthDate" in data:
            data["birth_date"] = data.pop("birthDate")
        return cls(**data)

    def to_table_row(self) -> Tuple[str, str, str]:
        """Columns shown in the users listing"""
        return self.name, self.email, self.birth_date
