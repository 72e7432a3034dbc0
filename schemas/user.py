import enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, enum.Enum):
    USER = 'user'
    ADMIN = 'admin'


class UserBase(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: int
    username: str
    role: Role


class SignupUser(BaseModel):
    model_config = ConfigDict(extra='ignore')

    username: str = Field(description='회원 아이디', examples=['user 1'])
    password: str = Field(description='비밀번호', examples=['789456'])
    role: Role = Field(default=Role.USER, description='회원 권한. 주어지지 않으면 `user`')


class LoginUser(BaseModel):
    model_config = ConfigDict(extra='ignore')

    username: str
    password: str


class SessionUser(UserBase):
    """
    로그인 시점의 회원 정보 스냅샷입니다. 세션 저장소에 그대로 보관됩니다.
    """
    password: str
