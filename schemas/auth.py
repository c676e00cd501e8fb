from pydantic import EmailStr, Field, SecretStr, AfterValidator
import re
from typing import Annotated

from schemas.common import CamelModel

PASSWORD_REGEX = re.compile(
    r"^[A-Za-z0-9!@#$%^&*()_\-+=\[\]{};:'\",.<>/?|`~]+$"
)

def validate_password(v: SecretStr) -> SecretStr:
    password = v.get_secret_value()

    if len(password) < 8:
        raise ValueError("Password must be at least 8 characters long")

    if " " in password:
        raise ValueError("Password must not contain spaces")

    if not PASSWORD_REGEX.fullmatch(password):
        raise ValueError(
            "Password may contain only English letters, digits and special symbols"
        )

    return v


ValidatePassword = Annotated[SecretStr, AfterValidator(validate_password)]


class RegisterIn(CamelModel):
    email: EmailStr
    full_name: str = Field(min_length=1, max_length=100)
    password: ValidatePassword
    profile_pic: str = Field(default="", max_length=500)


class LoginIn(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)


class UserOut(CamelModel):
    id: int
    email: EmailStr
    full_name: str
    profile_pic: str = ""
