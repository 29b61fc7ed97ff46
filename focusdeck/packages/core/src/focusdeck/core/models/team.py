"""TeamMember 数据模型"""

from pydantic import BaseModel, Field


class MemberColor(BaseModel):
    """可持久化的 RGBA 颜色，分量取值 0-1"""

    red: float = Field(ge=0.0, le=1.0)
    green: float = Field(ge=0.0, le=1.0)
    blue: float = Field(ge=0.0, le=1.0)
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)


# 成员头像可选颜色
PURPLE = MemberColor(red=0.69, green=0.32, blue=0.87)
BLUE = MemberColor(red=0.0, green=0.48, blue=1.0)
GREEN = MemberColor(red=0.2, green=0.78, blue=0.35)
ORANGE = MemberColor(red=1.0, green=0.58, blue=0.0)
PINK = MemberColor(red=1.0, green=0.18, blue=0.33)
CYAN = MemberColor(red=0.2, green=0.68, blue=0.9)
INDIGO = MemberColor(red=0.35, green=0.34, blue=0.84)
MINT = MemberColor(red=0.0, green=0.78, blue=0.75)

MEMBER_PALETTE: tuple[MemberColor, ...] = (
    PURPLE,
    BLUE,
    GREEN,
    ORANGE,
    PINK,
    CYAN,
    INDIGO,
    MINT,
)


class TeamMember(BaseModel):
    """TeamMember 数据模型 -- 只追加，不提供删除"""

    member_id: str = Field(description="唯一标识，ULID 格式")
    name: str = Field(description="姓名")
    email: str = Field(description="邮箱")
    role: str = Field(default="Team Member", description="角色")
    color: MemberColor = Field(default=BLUE, description="头像颜色")
    is_online: bool = Field(default=False, description="是否在线")

    @property
    def initials(self) -> str:
        """首个词首字母 + 最后一个词首字母（单个词时只取首字母）"""
        tokens = self.name.split(" ")
        first = tokens[0][:1]
        last = tokens[-1][:1] if len(tokens) > 1 else ""
        return first + last
