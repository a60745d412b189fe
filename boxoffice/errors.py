"""
boxoffice/errors.py

    爬虫对外抛出的所有异常。调用方只需要 catch KobisError 即可兜底。
"""

from __future__ import annotations

from datetime import date


class KobisError(Exception):
    """所有 KOBIS 爬虫异常的基类"""


class NetworkError(KobisError):
    """请求 KOBIS 失败（连接错误、超时、非 2xx 状态码）"""


class ParseError(KobisError):
    """页面结构和预期不符：缺表格、缺标题、onclick 格式变了等"""


class NotFoundError(KobisError):
    """页面本身正常，但找不到指定的单个元素（主海报、剧情简介）"""


class NotScrappedDateError(KobisError):
    """查询的日期不在构造时抓取的区间内"""

    def __init__(self, target: date):
        super().__init__(f"{target.isoformat()} was not scrapped")
        self.date = target
