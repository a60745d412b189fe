"""
crawler_config.py

集中放 KOBIS 爬虫共用的站点地址、表单参数和解析用的常量。
页面结构一变，基本只需要改这里。
"""

from __future__ import annotations

# ===== 站点地址 =====

KOBIS_ORIGIN = "https://www.kobis.or.kr"

# 日票房榜单（按日期区间一次性返回）
DAILY_BOX_OFFICE_URL = f"{KOBIS_ORIGIN}/kobis/business/stat/boxs/findDailyBoxOfficeList.do"

# 电影详情弹窗（海报、剧照、剧情简介）
MOVIE_DETAIL_URL = f"{KOBIS_ORIGIN}/kobis/business/mast/mvie/searchMovieDtl.do"

# ===== 请求相关 =====

# 秒，外部站点不受控，必须有上限
REQUEST_TIMEOUT = 10

REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0 Safari/537.36"
    ),
    "Referer": f"{KOBIS_ORIGIN}/",
}

# ===== 榜单页解析 =====

# 每个日期区块的 <h4> 形如 "2024년 01월 15일(월)"
HEADING_DATE_FORMAT = "%Y년 %m월 %d일"
# 标题末尾固定 3 个字符（星期等），解析前去掉
HEADING_SUFFIX_LENGTH = 3

# ===== 详情弹窗解析 =====

# 缩略图尺寸目录，例如 thumb_x150 -> thumb_x640
THUMBNAIL_SIZE_CODE = "thumb_x640"

SYNOPSIS_LABEL = "시놉시스"
