from typing import Optional

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class RegisterIn(BaseModel):
    # All optional at the schema level: absent values reach the service and come back as MISSING_FIELD.
    username: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    experience_level: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("experienceLevel", "experience_level"),
    )

    @field_validator("username", "email", "password", "experience_level", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        return _blank_to_none(value)


class LoginIn(BaseModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = None

    @field_validator("email", "password", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        return _blank_to_none(value)
