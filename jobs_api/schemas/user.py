# jobs-api\jobs_api\schemas\user.py

from pydantic import BaseModel, ConfigDict, Field

# Request bodies keep every field optional so the account service can
# report the missing ones with its own messages.
class RegisterRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None

class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None

# Public views of a user (never the password hash)
class UserSummary(BaseModel):
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)

class UserName(BaseModel):
    name: str

    model_config = ConfigDict(from_attributes=True)

# Auth responses: the registration view includes the email, the login view does not.
class RegisterResponse(BaseModel):
    user: UserSummary
    token: str

class LoginResponse(BaseModel):
    user: UserName
    token: str

# Identity carried inside a session token
class TokenPayload(BaseModel):
    user_id: str = Field(alias="userId")
    name: str

    model_config = ConfigDict(populate_by_name=True)
