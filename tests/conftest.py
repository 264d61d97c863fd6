"""Shared fixtures for arena_pages tests."""

from __future__ import annotations

import typing as typ

import pytest
from openpyxl import Workbook

if typ.TYPE_CHECKING:
    from pathlib import Path

WorkbookFactory = typ.Callable[..., "Path"]

TITLE_ROW = (
    "id",
    "name",
    "champion",
    "verification",
    "highlights",
    "industry",
    "category",
    "speed",
    "quality",
    "security",
    "cost",
    "challenger",
)
HEADER_ROW = (
    "序号",
    "擂台名称",
    "擂主",
    "验证状态",
    "亮点",
    "行业类别",
    "应用类别",
    "速度",
    "质量",
    "安全",
    "成本",
    "攻擂者",
)

ARENA_ROWS: tuple[tuple[object, ...], ...] = (
    (
        1,
        "智能调研报告生成",
        "私部署版：Dify（v1.2）",
        "已验证",
        "一周构建1个包含资料搜集、知识整合、报告生成功能的智能调研系统Demo",
        "金融贸易，信息技术",
        "服务",
        "较快",
        "很高",
        "较优",
        "较低",
        "寻找攻擂者",
    ),
    (
        10,
        "SQL语言智能生成",
        "云端版：Coze",
        "验证中",
        "快速搭建一个大模型，通过对话生成SQL脚本",
        "通用",
        "管理",
        "中等",
        "较高",
        "较高",
        "中等",
        None,
    ),
    (13, "敬请期待", None, None, None, None, None, None, None, None, None, None),
    ("备注", "not an arena", None, None, None, None, None, None, None, None, None, None),
)


@pytest.fixture
def make_workbook(tmp_path: Path) -> WorkbookFactory:
    """Return a factory writing an arena list workbook under ``tmp_path``."""

    def _make(
        rows: typ.Iterable[tuple[object, ...]] = ARENA_ROWS,
        name: str = "List of Arenas.xlsx",
    ) -> Path:
        workbook = Workbook()
        sheet = workbook.active
        sheet.append(TITLE_ROW)
        sheet.append(HEADER_ROW)
        sheet.append(())
        for row in rows:
            sheet.append(row)
        path = tmp_path / name
        workbook.save(path)
        return path

    return _make
