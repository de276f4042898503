from pydantic import BaseModel, Field, EmailStr, validator

class UserBase(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    role: str = Field(default="user")  # "user" or "admin"

    @validator('role')
    def validate_role(cls, v):
        if v not in ['user', 'admin']:
            raise ValueError('Role must be either "user" or "admin"')
        return v

class UserCreate(UserBase):
    password: str = Field(..., min_length=6)
