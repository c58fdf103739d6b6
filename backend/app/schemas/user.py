"""User schemas."""

from pydantic import Field, field_validator

from app.schemas.common import (
    BaseSchema,
    PaymentMethodEnum,
    RoleEnum,
    SkillLevelEnum,
    TimestampSchema,
)


class UserBase(BaseSchema):
    """Base user schema."""

    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    name: str = Field(..., min_length=1, max_length=100)
    roles: set[RoleEnum] = Field(..., min_length=1, description="Roles held by the user")
    level: SkillLevelEnum | None = Field(None, description="Rider level")
    specialization: str | None = Field(None, max_length=100, description="Trainer specialization")
    payment_method: PaymentMethodEnum | None = None
    subscription_hours: float = Field(0.0, ge=0)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class UserCreate(UserBase):
    """Schema for creating a user."""

    pass


class UserUpdate(BaseSchema):
    """Schema for updating a user."""

    email: str | None = Field(None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    name: str | None = Field(None, min_length=1, max_length=100)
    roles: set[RoleEnum] | None = Field(None, min_length=1)
    level: SkillLevelEnum | None = None
    specialization: str | None = Field(None, max_length=100)
    payment_method: PaymentMethodEnum | None = None
    subscription_hours: float | None = Field(None, ge=0)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str | None) -> str | None:
        return v.lower() if v else v


class UserResponse(UserBase, TimestampSchema):
    """User response schema."""

    id: int


class UserListResponse(BaseSchema):
    """User list response schema."""

    items: list[UserResponse]
    total: int
