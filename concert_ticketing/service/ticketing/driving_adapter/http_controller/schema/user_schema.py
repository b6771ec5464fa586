from uuid import UUID

from pydantic import BaseModel, EmailStr, SecretStr, field_validator


class RegisterRequest(BaseModel):
    model_config = {
        'json_schema_extra': {'example': {'email': 'a@b.com', 'password': '12345678'}},
    }

    email: EmailStr
    password: SecretStr

    @field_validator('password')
    @classmethod
    def validate_password_length(cls, v: SecretStr) -> SecretStr:
        if len(v.get_secret_value()) < 8:
            raise ValueError('Password must be at least 8 characters')
        # bcrypt only looks at the first 72 bytes
        if len(v.get_secret_value().encode()) > 72:
            raise ValueError('Password must be at most 72 bytes')
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: SecretStr


class UserResponse(BaseModel):
    id: UUID
    email: str
    is_admin: bool


class LoginResponse(BaseModel):
    token: str
    is_admin: bool
