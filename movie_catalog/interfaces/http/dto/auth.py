from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class SignupRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)
    name: str | None = Field(None, max_length=128)

    @field_validator("username", "name", mode="before")
    @classmethod
    def strip_text(cls, value: object) -> object:
        # passwords are taken verbatim
        return value.strip() if isinstance(value, str) else value


class SigninRequestDTO(BaseModel):
    # Presence is checked by the use case so a missing username reads as "user not found"
    username: str | None = None
    password: str | None = None

    @field_validator("username", "password", mode="before")
    @classmethod
    def text_or_none(cls, value: object) -> str | None:
        # anything but a string counts as absent
        return value if isinstance(value, str) else None

    @field_validator("username", mode="after")
    @classmethod
    def strip_username(cls, value: str | None) -> str | None:
        return value.strip() if value is not None else None


class SignupSuccessDTO(BaseModel):
    success: bool = True
    message: str = "Successfully created new user."


class SigninSuccessDTO(BaseModel):
    success: bool = True
    token: str
