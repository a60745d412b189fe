"""
boxoffice/ranking.py

    解析 KOBIS 日票房榜单页（findDailyBoxOfficeList.do）。

    页面结构（只列出用到的部分）：

    <div class="rst_sch">
        <div>
            <h4>2024년 01월 15일(월)</h4>
            <table>
                <tbody>
                    <tr>
                        <td>1</td>
                        <td><a title="电影名" onclick="mstView('movie','20231234');return false;">...</a></td>
                        ...
                    </tr>
                </tbody>
            </table>
        </div>
        ...
    </div>

    每个日期一个 div，标题和表格都是它的直接子节点，按同一个父节点配对。
"""
from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Dict, Tuple

from bs4 import BeautifulSoup

from boxoffice.errors import ParseError
from boxoffice.models import BoxOfficeEntry
from crawler_config import HEADING_DATE_FORMAT, HEADING_SUFFIX_LENGTH

logger = logging.getLogger(__name__)

SECTION_SELECTOR = ".rst_sch > div"

# onclick 里的分隔符
_ONCLICK_TOKEN_SEP = "','"
_ONCLICK_TERMINATOR = "');"

# 只认 ASCII 数字，不接受 "+"、"_"、空白和全角数字
_DIGITS_RE = re.compile(r"\d+", re.ASCII)


"""小工具"""

def parse_movie_code(onclick: str) -> int:
    """
    从 <a> 的 onclick 属性中解析电影代码。

    语法：<前缀>','<代码>');<任意后缀>
    - 按 "','" 切分，至少 2 段，取第 2 段
    - 第 2 段必须包含 "');"，取它前面的部分
    - 剩下的必须全是 ASCII 数字（不允许空白、符号、下划线）

    例如 mstView('movie','20231234');return false; -> 20231234

    :param onclick: onclick 属性原文
    :return: 电影代码
    """
    tokens = (onclick or "").split(_ONCLICK_TOKEN_SEP)
    if len(tokens) < 2:
        raise ParseError(f"onclick has no code token: {onclick!r}")

    code_part, sep, _ = tokens[1].partition(_ONCLICK_TERMINATOR)
    if not sep:
        raise ParseError(f"onclick code token is not terminated: {onclick!r}")

    if not _DIGITS_RE.fullmatch(code_part):
        raise ParseError(f"onclick code is not an integer: {onclick!r}")
    return int(code_part)


def parse_heading_date(
        text: str,
        date_format: str = HEADING_DATE_FORMAT,
        suffix_length: int = HEADING_SUFFIX_LENGTH,
) -> date:
    """
    把区块标题解析成日期。

    :param text: <h4> 的文本，例如 "2024년 01월 15일(월)"
    :param date_format: strptime 格式
    :param suffix_length: 末尾需要去掉的字符数
    :return: 标题对应的日期
    """
    text = text.strip()
    if len(text) <= suffix_length:
        raise ParseError(f"heading too short: {text!r}")

    date_str = text[:-suffix_length] if suffix_length else text
    try:
        return datetime.strptime(date_str, date_format).date()
    except ValueError:
        raise ParseError(f"heading {text!r} does not match {date_format!r}") from None


"""内部解析子函数"""

def _parse_row(tr) -> BoxOfficeEntry:
    """解析表格中的一行 <tr>"""
    cols = tr.find_all("td", recursive=False)
    if len(cols) < 2:
        raise ParseError(f"row has {len(cols)} columns, expected at least 2")

    rank_text = cols[0].get_text(strip=True)
    if not _DIGITS_RE.fullmatch(rank_text):
        raise ParseError(f"rank is not an integer: {rank_text!r}")
    rank = int(rank_text)

    a = cols[1].find("a")
    if a is None:
        raise ParseError(f"row with rank {rank} has no movie link")

    title = a.get("title")
    if title is None:
        raise ParseError(f"movie link of rank {rank} has no title")

    code = parse_movie_code(a.get("onclick", ""))
    logger.debug("rank=%d code=%d title=%s", rank, code, title)
    return BoxOfficeEntry(rank=rank, title=title, code=code)


def _parse_table(table) -> Tuple[BoxOfficeEntry, ...]:
    # lxml 不会自动补 <tbody>，没有时直接取 table 下的 <tr>（<thead> 里的行不算）
    tbody = table.find("tbody", recursive=False)
    rows = (tbody if tbody is not None else table).find_all("tr", recursive=False)

    return tuple(_parse_row(tr) for tr in rows)


"""外部解析函数"""

def parse_daily_box_office(
        html: str,
        date_format: str = HEADING_DATE_FORMAT,
        suffix_length: int = HEADING_SUFFIX_LENGTH,
) -> Dict[date, Tuple[BoxOfficeEntry, ...]]:
    """
    解析整张榜单页，返回 日期 -> 榜单 的 dict。

    任何一行解析失败都会抛 ParseError，不返回部分结果。
    """
    soup = BeautifulSoup(html, "lxml")

    result: Dict[date, Tuple[BoxOfficeEntry, ...]] = {}
    for section in soup.select(SECTION_SELECTOR):
        h4 = section.find("h4", recursive=False)
        table = section.find("table", recursive=False)

        # 既没有标题也没有表格的 div 不是日期区块
        if h4 is None and table is None:
            logger.debug("skip ranking div without heading and table")
            continue
        if h4 is None:
            raise ParseError("ranking table has no date heading")
        if table is None:
            raise ParseError(f"date heading {h4.get_text(strip=True)!r} has no table")

        day = parse_heading_date(h4.get_text(), date_format, suffix_length)
        if day in result:
            raise ParseError(f"duplicate ranking section for {day.isoformat()}")

        result[day] = _parse_table(table)
        logger.info("parsed %d entries for %s", len(result[day]), day.isoformat())

    return result
