"""
movie_info/popup.py

    抓取 KOBIS 电影详情弹窗（searchMovieDtl.do），抽取：

    - 海报 / 剧照 URL 列表（第 0 / 1 个 div.info2 里的 <img>）
    - 主海报 URL（a.fl.thumb 的 href）
    - 剧情简介（标题为 "시놉시스" 的 .info2 下的 .desc_info）

    每个 get_* 函数都对应一个只吃 HTML 文本的 parse_* 函数，方便离线测试。
"""
from __future__ import annotations

import json
import logging
import re
from typing import Dict, List

from bs4 import BeautifulSoup

from boxoffice.errors import NotFoundError, ParseError
from boxoffice.models import ImageType
from crawler_config import (
    KOBIS_ORIGIN,
    MOVIE_DETAIL_URL,
    SYNOPSIS_LABEL,
    THUMBNAIL_SIZE_CODE,
)
from utils import fetch_html

logger = logging.getLogger(__name__)

IMAGE_BLOCK_SELECTOR = "div.info2"
INFO_BLOCK_SELECTOR = ".info2"
MAIN_POSTER_SELECTOR = "a.fl.thumb"
DESC_SELECTOR = ".desc_info"

# thumb_x150 这种尺寸目录
_SIZE_CODE_RE = re.compile(r"thumb_x\d{3}")
# 缩略图前缀：尺寸目录 + thn_，去掉就是原图
_THUMB_PREFIX_RE = re.compile(r"thumb_x\d{3}/thn_")
_WHITESPACE_RE = re.compile(r"\s+")


"""小工具"""

def _build_popup_form(code: int) -> Dict[str, str]:
    return {
        "code": str(code),
        "sType": "",
        "titleYN": "Y",
        "etcParam": "",
        "isOuterReq": "false",
    }


def rewrite_image_src(src: str, thumbnail: bool) -> str:
    """
    把 <img> 的 src 改写成绝对 URL。

    :param src: 站内路径，例如 /common/mast/movie/2024/01/thumb_x150/thn_abc.jpg
    :param thumbnail: True -> 换成 640 宽的缩略图；False -> 去掉缩略图前缀，指向原图
    :return: 带站点前缀的 URL
    """
    if thumbnail:
        path = _SIZE_CODE_RE.sub(THUMBNAIL_SIZE_CODE, src, count=1)
    else:
        path = _THUMB_PREFIX_RE.sub("", src, count=1)
    return KOBIS_ORIGIN + path


def _normalized_text(node) -> str:
    """取节点文本：<br> 当空格，连续空白合并成一个，首尾去空白"""
    for br in node.find_all("br"):
        br.replace_with(" ")
    return _WHITESPACE_RE.sub(" ", node.get_text()).strip()


def load_popup(code: int) -> str:
    """请求电影详情弹窗，返回 HTML 文本"""
    return fetch_html(MOVIE_DETAIL_URL, _build_popup_form(code))


"""外部解析函数"""

def parse_image_urls(html: str, image_type: ImageType, thumbnail: bool = False) -> List[str]:
    """
    从弹窗 HTML 中取出某一类图片的全部 URL，顺序与页面中 <img> 一致。

    区块里没有图片时返回空列表；区块本身不存在则抛 ParseError。
    """
    soup = BeautifulSoup(html, "lxml")

    blocks = soup.select(IMAGE_BLOCK_SELECTOR)
    index = image_type.value
    if index >= len(blocks):
        raise ParseError(
            f"{image_type.name} block #{index} not found, page has {len(blocks)} info blocks"
        )

    urls: List[str] = []
    for img in blocks[index].find_all("img"):
        src = img.get("src")
        # 没有 src 时不拼出一个只有站点前缀的 URL，直接报错
        if not src:
            raise ParseError(f"<img> without src in {image_type.name} block")
        urls.append(rewrite_image_src(src, thumbnail))

    return urls


def parse_main_poster(html: str) -> str:
    """从弹窗 HTML 中取出主海报 URL"""
    soup = BeautifulSoup(html, "lxml")

    a = soup.select_one(MAIN_POSTER_SELECTOR)
    if a is None or not a.get("href"):
        raise NotFoundError("main poster link not found")

    return KOBIS_ORIGIN + a["href"]


def parse_synopsis(html: str) -> str:
    """
    从弹窗 HTML 中取出剧情简介。

    找不到 "시놉시스" 区块时抛 NotFoundError，不返回空字符串。
    """
    soup = BeautifulSoup(html, "lxml")

    for block in soup.select(INFO_BLOCK_SELECTOR):
        # 有些区块没有标题，跳过
        label = block.find("strong")
        if label is None or label.get_text().strip() != SYNOPSIS_LABEL:
            continue

        desc = block.select_one(DESC_SELECTOR)
        if desc is None:
            raise ParseError("synopsis block has no description")
        return _normalized_text(desc)

    raise NotFoundError("synopsis block not found")


"""外部抓取函数"""

def get_image_urls_by_code(code: int, image_type: ImageType, thumbnail: bool = False) -> List[str]:
    """抓取电影 code 的海报或剧照 URL 列表"""
    urls = parse_image_urls(load_popup(code), image_type, thumbnail)
    logger.info("movie %d: %d %s image(s)", code, len(urls), image_type.name)
    return urls


def get_main_poster_by_code(code: int) -> str:
    """抓取电影 code 的主海报 URL"""
    return parse_main_poster(load_popup(code))


def get_synopsis_by_code(code: int) -> str:
    """抓取电影 code 的剧情简介"""
    return parse_synopsis(load_popup(code))


def main():
    logging.basicConfig(level=logging.INFO)
    code = 20112207

    record = {
        "code": code,
        "main_poster": get_main_poster_by_code(code),
        "posters": get_image_urls_by_code(code, ImageType.POSTER),
        "still_cuts": get_image_urls_by_code(code, ImageType.STILL_CUT, thumbnail=True),
        "synopsis": get_synopsis_by_code(code),
    }
    print(json.dumps(record, ensure_ascii=False, indent=2))


if __name__ == '__main__':
    main()
