"""
boxoffice/repository.py

    BoxOfficeRepository：构造时一次性抓取 [start, end] 区间的日票房榜单，
    之后只读，按日期查询。

    另外挂了三个和榜单无关的静态方法（海报/剧照、主海报、剧情简介），
    实际实现在 movie_info.popup。
"""
from __future__ import annotations

import json
import logging
from datetime import date
from typing import Dict, List, Tuple

from boxoffice.errors import NotScrappedDateError, ParseError
from boxoffice.models import BoxOfficeEntry
from boxoffice.ranking import parse_daily_box_office
from crawler_config import DAILY_BOX_OFFICE_URL
from movie_info import popup
from utils import fetch_html

logger = logging.getLogger(__name__)


def _build_ranking_form(start: date, end: date) -> Dict[str, str]:
    return {
        "loadEnd": "0",
        "sMultiMovieYn": "",
        "sRepNationCd": "",
        "sSearchFrom": start.isoformat(),
        "sSearchTo": end.isoformat(),
        "sWideAreaCd": "",
        "searchType": "search",
    }


class BoxOfficeRepository:
    """
    日票房榜单的内存仓库。

    构造失败（网络错误、任何一行解析失败）会直接抛异常，没有部分成功。
    start > end 时不发请求，得到一个空仓库。
    """

    get_image_urls_by_code = staticmethod(popup.get_image_urls_by_code)
    get_main_poster_by_code = staticmethod(popup.get_main_poster_by_code)
    get_synopsis_by_code = staticmethod(popup.get_synopsis_by_code)

    def __init__(self, start: date, end: date):
        self.start = start
        self.end = end
        self._box_offices: Dict[date, Tuple[BoxOfficeEntry, ...]] = self._scrap(start, end)

    @staticmethod
    def _scrap(start: date, end: date) -> Dict[date, Tuple[BoxOfficeEntry, ...]]:
        if start > end:
            logger.info("empty range %s ~ %s, nothing to fetch", start, end)
            return {}

        html = fetch_html(DAILY_BOX_OFFICE_URL, _build_ranking_form(start, end))
        box_offices = parse_daily_box_office(html)

        for day in box_offices:
            if not start <= day <= end:
                raise ParseError(f"page returned {day.isoformat()}, outside {start} ~ {end}")

        logger.info("scrapped %d day(s) between %s and %s", len(box_offices), start, end)
        return box_offices

    @property
    def dates(self) -> List[date]:
        """已抓取的日期，升序"""
        return sorted(self._box_offices)

    def get_box_offices_by_date(self, target: date) -> Tuple[BoxOfficeEntry, ...]:
        """
        返回 target 当天的票房榜单，按排名排列。

        :param target: 榜单基准日
        :raises NotScrappedDateError: target 不在抓取结果里
        """
        try:
            return self._box_offices[target]
        except KeyError:
            raise NotScrappedDateError(target) from None

    def __contains__(self, target: object) -> bool:
        return target in self._box_offices

    def __len__(self) -> int:
        return len(self._box_offices)


def main():
    logging.basicConfig(level=logging.INFO)
    repo = BoxOfficeRepository(date(2024, 1, 1), date(2024, 1, 3))

    for day in repo.dates:
        print(f"===== {day.isoformat()} =====")
        for entry in repo.get_box_offices_by_date(day):
            print(json.dumps(entry.to_dict(), ensure_ascii=False))


if __name__ == '__main__':
    main()
