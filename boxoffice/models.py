from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


@dataclass(frozen=True)
class BoxOfficeEntry:
    """榜单中的一行"""

    rank: int   # 票房排名，从 1 开始
    title: str  # 电影名
    code: int   # 영화정보통합관리 표준코드（FIMS 代码）

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ImageType(Enum):
    """详情弹窗里的图片区块，值就是第几个 div.info2"""

    POSTER = 0
    STILL_CUT = 1
