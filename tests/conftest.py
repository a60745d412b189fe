"""
Pytest configuration and shared HTML fixtures.
"""

import pytest


def ranking_row(rank, title, code):
    """Build one <tr> of the daily box-office table."""
    return (
        "<tr>"
        f"<td>{rank}</td>"
        f"<td><span class=\"ellip per90\">"
        f"<a href=\"#\" title=\"{title}\" "
        f"onclick=\"mstView('movie','{code}');return false;\">{title}</a>"
        "</span></td>"
        "<td>2024-01-01</td>"
        "</tr>"
    )


def ranking_section(heading, rows):
    return (
        "<div>"
        f"<h4>{heading}</h4>"
        "<table><thead><tr><th>순위</th><th>영화명</th></tr></thead>"
        f"<tbody>{''.join(rows)}</tbody></table>"
        "</div>"
    )


def ranking_page(*sections):
    return (
        "<html><body><div class=\"rst_sch\">"
        + "".join(sections)
        + "</div></body></html>"
    )


@pytest.fixture
def single_day_html():
    """One section, one row, as in the canonical example."""
    return ranking_page(
        ranking_section("2024년 01월 15일 순위", [ranking_row(1, "Sample Movie", 12345)])
    )


@pytest.fixture
def three_day_html():
    return ranking_page(
        ranking_section("2024년 01월 01일(월)", [
            ranking_row(1, "서울의 봄", 20212866),
            ranking_row(2, "노량: 죽음의 바다", 20201122),
            ranking_row(3, "위시", 20233086),
        ]),
        ranking_section("2024년 01월 02일(화)", [
            ranking_row(1, "노량: 죽음의 바다", 20201122),
            ranking_row(2, "서울의 봄", 20212866),
        ]),
        ranking_section("2024년 01월 03일(수)", [
            ranking_row(1, "노량: 죽음의 바다", 20201122),
        ]),
    )


@pytest.fixture
def empty_ranking_html():
    return ranking_page()


@pytest.fixture
def popup_html():
    """Detail popup with poster, still-cut and synopsis blocks."""
    return """
    <html><body>
    <div class="item_tab basic">
        <div class="ovf info info1">
            <a href="/common/mast/movie/2023/11/main.jpg" class="fl thumb" onclick="return false;">
                <img src="/common/mast/movie/2023/11/thumb_x192/thn_main.jpg" alt="">
            </a>
        </div>
        <div class="info info2">
            <strong class="tit_info">포스터</strong>
            <ul>
                <li><img src="/common/mast/movie/2023/11/thumb_x150/thn_poster1.jpg"></li>
                <li><img src="/common/mast/movie/2023/11/thumb_x150/thn_poster2.jpg"></li>
            </ul>
        </div>
        <div class="info info2">
            <strong class="tit_info">스틸컷</strong>
            <ul>
                <li><img src="/common/mast/movie/2023/11/thumb_x110/thn_still1.jpg"></li>
                <li><img src="/common/mast/movie/2023/11/thumb_x110/thn_still2.jpg"></li>
                <li><img src="/common/mast/movie/2023/11/thumb_x110/thn_still3.jpg"></li>
            </ul>
        </div>
        <div class="info info2">
            <div class="notice">no label here</div>
        </div>
        <div class="info info2">
            <strong class="tit_info"> 시놉시스 </strong>
            <p class="desc_info">
                1979년 12월 12일, 수도 서울 군사반란 발생.
            </p>
        </div>
    </div>
    </body></html>
    """


@pytest.fixture
def bare_popup_html():
    """Popup whose image blocks are empty and which has no poster or synopsis."""
    return """
    <html><body>
        <div class="info info2"><strong>포스터</strong><ul></ul></div>
        <div class="info info2"><strong>스틸컷</strong><ul></ul></div>
    </body></html>
    """
