"""分析视图模型 -- Achievement / HeatmapDay

这些模型只在读取时计算，从不持久化。
"""

from datetime import date

from pydantic import BaseModel, Field


class Achievement(BaseModel):
    """成就 -- 由计数器和集合实时计算"""

    achievement_id: str
    title: str
    description: str
    icon: str
    is_unlocked: bool
    progress: float = Field(ge=0.0, le=1.0, description="完成进度 0-1")


class HeatmapDay(BaseModel):
    """热力图单日数据"""

    day: date
    intensity: float = Field(ge=0.0, le=1.0)
