from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class UserOut(BaseModel):
    uid: str
    email: EmailStr


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    uid: str
