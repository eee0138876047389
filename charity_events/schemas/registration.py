# charity_events/schemas/registration.py
from typing import Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator


class RegistrationCreate(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    email: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=0, le=150)
    volunteer_experience: Optional[str] = Field(
        None, validation_alias=AliasChoices("volunteer_experience", "experience")
    )
    motivation: Optional[str] = None
    allow_contact: bool = Field(
        False, validation_alias=AliasChoices("allow_contact", "allowContact")
    )

    @field_validator("name", "phone", mode="before")
    @classmethod
    def number_to_str(cls, v):
        # phone numbers sometimes arrive as JSON numbers
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("email", "age", "volunteer_experience", "motivation", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("allow_contact", mode="before")
    @classmethod
    def none_is_false(cls, v):
        return False if v is None else v


class RegistrationResult(BaseModel):
    message: str = "Registration successful"
    registrationId: int
