from pydantic import BaseModel, Field

class AccountCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)

class AccountResponse(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True
