"""Static lookup tables and helpers that translate arena list fields.

Sentence-level tables are tried first; word-level tables act as a fallback
for rows added to the spreadsheet after the tables were last extended.
Word replacements apply longest key first so compound phrases win over their
parts.

Examples
--------
>>> translate_category("服务，管理")
'Service, Management'
>>> translate_champion("私部署版：Dify（v1.2 ）")
'Private Deployment: Dify(v1.2)'
>>> arena_slug("SQL语言智能生成")
'sql语言智能生成'
"""

from __future__ import annotations

import re

LIST_SEPARATOR = re.compile(r",|，")

INDUSTRY_NAMES: dict[str, str] = {
    "信息技术": "Information Technology",
    "金融贸易": "Finance & Trade",
    "科研教育": "Science & Education",
    "能源制造": "Energy & Manufacturing",
    "行政管理": "Administration",
    "文化体育": "Culture & Sports",
    "通用": "General",
    "农林牧渔": "Agriculture, Forestry, Animal Husbandry & Fishery",
}

CATEGORY_NAMES: dict[str, str] = {
    "服务": "Service",
    "运营": "Operations",
    "管理": "Management",
    "营销": "Marketing",
    "风控": "Risk Control",
    "通用": "General",
}

CHAMPION_PREFIXES: dict[str, str] = {
    "私部署版：": "Private Deployment: ",
    "云端版：": "Cloud Version: ",
}

CHALLENGER_PLACEHOLDER = "寻找攻擂者"

SPECIAL_CHALLENGERS: dict[str, str] = {
    CHALLENGER_PLACEHOLDER: "Looking for Challengers",
    "暂无": "None",
}

VERIFICATION_STATUSES: dict[str, str] = {
    "已验证": "Verified",
    "验证中": "In Verification",
}

METRIC_VALUES: dict[str, str] = {
    "很快": "Very Fast",
    "较快": "Relatively Fast",
    "中等": "Medium",
    "较慢": "Relatively Slow",
    "很高": "Very High",
    "较高": "Relatively High",
    "较低": "Relatively Low",
    "较优": "Optimal",
}

METRIC_LABELS: dict[str, str] = {
    "速度": "Speed",
    "质量": "Quality",
    "安全": "Security",
    "成本": "Cost",
}

HIGHLIGHT_SENTENCES: dict[str, str] = {
    "一周构建1个包含资料搜集、知识整合、报告生成功能的智能调研系统Demo": (
        "Build an intelligent research system demo with data collection, "
        "knowledge integration, and report generation capabilities in one week"
    ),
    "0技术门槛1-2日内搭建出1个有基础互动能力的业务看板或网站Demo": (
        "Build a business dashboard or website demo with basic interactive "
        "capabilities in 1-2 days with zero technical threshold"
    ),
    "一周构建1个完整性检查与风险评估的文档解析系统Demo": (
        "Build a document parsing system demo with completeness checks and "
        "risk assessment in one week"
    ),
    "最快2.5日内生成1个企业级产品或功能简要演示视频": (
        "Generate an enterprise-level product or feature demo video within "
        "2.5 days at fastest"
    ),
    "一周搭建一个儿童教育应用Demo": "Build a children's education app demo in one week",
    "一周用低代码快速构建并验证一个面向能源领域的长时间序列预测系统Demo": (
        "Rapidly build and verify a long-term time series forecasting system "
        "demo for the energy sector using low-code in one week"
    ),
    "一周快速构建1个智能文档翻译Demo": (
        "Rapidly build an intelligent document translation demo in one week"
    ),
    "一天搭建出基于要素抽取与跨合同规则校验、可配置与溯源的智能合同法审系统Demo": (
        "Build an intelligent contract legal review system demo with element "
        "extraction, cross-contract validation, configurability, and "
        "traceability in one day"
    ),
    "一周构建1个高精度、含数据流闭环、具备自进化能力的通用目标检测系统Demo": (
        "Build a high-precision universal object detection system demo with "
        "closed-loop data flow and self-evolving capabilities in one week"
    ),
    "快速搭建一个大模型，通过对话生成SQL脚本": (
        "Rapidly build a large model that generates SQL scripts through conversation"
    ),
    "一周基于低代码构建一个具备主动追问与推荐能力的对话式助手Demo": (
        "Build a conversational assistant demo with active questioning and "
        "recommendation capabilities using low-code in one week"
    ),
    "一周低代码构建具备多源数据整合、合规校验、信贷报告一键生成能力的银行智能信贷系统Demo": (
        "Build a banking intelligent credit system demo with multi-source data "
        "integration, compliance verification, and one-click credit report "
        "generation using low-code in one week"
    ),
    "一周低代码完成单条全国产业链图谱全流程构建": (
        "Complete the full-process construction of a single national "
        "industrial chain graph using low-code in one week"
    ),
}

HIGHLIGHT_WORDS: dict[str, str] = {
    "一周": "One week",
    "两天": "Two days",
    "一天": "One day",
    "最快2.5日内": "Within 2.5 days",
    "搭建": "build",
    "构建": "construct",
    "生成": "generate",
    "创建": "create",
    "一个": "a",
    "1个": "a",
    "包含": "including",
    "具备": "featuring",
    "系统": "system",
    "应用": "application",
    "低代码": "low-code",
    "快速": "rapidly",
    "通过": "via",
    "基于": "based on",
    "企业级": "enterprise-level",
    "智能": "intelligent",
    "或": "or",
    "及": "&",
    "与": "and",
    "并": "and",
    "功能": "functionality",
    "能力": "capability",
    "含": "including",
    "用": "using",
    "完成": "complete",
    "出": "",
    "的": "",
    "Demo": " Demo",
}

_RESEARCH = "Enterprise-Level Intelligent Research Report Generation System Demo"
_DASHBOARD = "Business Dashboard & Website Demo"
_REVIEW = "Document Review & Risk Control Demo"
_VIDEO = "Enterprise Demo Video"
_EDUCATION = "Educational App for Children Demo"
_FORECAST = "Long-Term Time Series Forecasting System Demo (Energy)"
_TRANSLATION = "Intelligent Document Translation System Demo"
_CONTRACT = "Intelligent Contract Legal Review System Demo"
_DETECTION = "Universal Object Detection System Demo"
_NL2SQL = "Universal Practice of SQL Language Intelligent Generation (NL2SQL)"
_ASSISTANT = "Feature Recommendation Assistant Demo"
_CREDIT = "Intelligent Credit Report Generation System Demo"
_CHAIN = "Single Industrial Chain Graph"

TITLE_SENTENCES: dict[str, str] = {
    "智能调研报告生成": _RESEARCH,
    "业务看板搭建": _DASHBOARD,
    "文档审核与风控": _REVIEW,
    "企业演示视频": _VIDEO,
    "儿童教育趣味应用": _EDUCATION,
    "长时间序列预测系统": _FORECAST,
    "智能文档翻译系统": _TRANSLATION,
    "智能合同法审系统": _CONTRACT,
    "通用目标检测系统": _DETECTION,
    "SQL语言智能生成": _NL2SQL,
    "功能推荐助手": _ASSISTANT,
    "智能信贷报告生成系统": _CREDIT,
    "单条产业链图谱": _CHAIN,
    # Long spreadsheet titles used before the short names.
    "一周搭建企业级智能调研报告生成系统Demo": _RESEARCH,
    "一周搭建企业级智能调研报告生成系统demo": _RESEARCH,
    "两天搭建业务看板及网站Demo": _DASHBOARD,
    "两天搭建业务看板及网站demo": _DASHBOARD,
    "一周搭建文档审核与风控Demo": _REVIEW,
    "一周搭建文档审核与风控demo": _REVIEW,
    "演示视频生成": _VIDEO,
    "两天半搭建企业级简要演示视频": _VIDEO,
    "一周搭建儿童教育趣味应用Demo": _EDUCATION,
    "一周搭建儿童教育趣味应用demo": _EDUCATION,
    "一周搭建长时间序列预测系统Demo（能源领域）": _FORECAST,
    "一周搭建长时间序列预测系统demo-能源领域": _FORECAST,
    "一周搭建智能文档翻译系统Demo": _TRANSLATION,
    "一周搭建智能文档翻译系统demo": _TRANSLATION,
    "多合同交叉校验的智能合同法审系统": _CONTRACT,
    "一天构建一个多合同交叉校验的智能合同法审系统Demo": _CONTRACT,
    "一天构建一个多合同交叉校验的智能合同法审系统demo": _CONTRACT,
    "高精度通用目标检测系统": _DETECTION,
    "一周搭建高精度通用目标检测系统Demo（能源&农林领域）": _DETECTION,
    "一周搭建高精度通用目标检测系统demo-能源-农林领域": _DETECTION,
    "SQL语言智能生成(NL2SQL)的通用实践": _NL2SQL,
    "sql语言智能生成-nl2sql-的通用实践": _NL2SQL,
    "对话式功能推荐助手": _ASSISTANT,
    "一周搭建对话式功能推荐助手Demo（AI领域）": _ASSISTANT,
    "一周搭建对话式功能推荐助手demo-ai领域": _ASSISTANT,
    "一周构建智能信贷报告生成系统Demo": _CREDIT,
    "一周构建智能信贷报告生成系统demo": _CREDIT,
    "全国产业链图谱": _CHAIN,
    "一周构建单条全国产业链图谱": _CHAIN,
}

TITLE_WORDS: dict[str, str] = {
    "一周": "1-Week ",
    "两周": "2-Week ",
    "三天": "3-Day ",
    "一天": "1-Day ",
    "两天": "2-Day ",
    "两天半": "2.5-Day ",
    "搭建": "Build ",
    "构建": "Construct ",
    "生成": "Generate ",
    "创建": "Create ",
    "开发": "Develop ",
    "企业级": "Enterprise-Level ",
    "智能": "Intelligent ",
    "系统": "System ",
    "应用": "Application ",
    "Demo": " Demo",
    "demo": " Demo",
    "及": " & ",
    "与": " and ",
    "一个": " a ",
    "单条": " Single ",
    "全国": "National ",
}

# Titles mapped to the content folder that holds their detail documents; an
# empty value marks an arena without content and falls back to the slug.
FOLDER_IDS: dict[str, str] = {
    "智能调研报告生成": "1-intelligent-research-system",
    "业务看板搭建": "2-business-dashboard-website",
    "文档审核与风控": "3-document-review-risk-control",
    "企业演示视频": "",
    "儿童教育趣味应用": "5-educational-app-children",
    "长时间序列预测系统": "6-time-series-forecasting-energy",
    "智能文档翻译系统": "7-document-translation",
    "智能合同法审系统": "intelligent-system",
    "通用目标检测系统": "system",
    "SQL语言智能生成": "10-nl2sql",
    "功能推荐助手": "",
    "智能信贷报告生成系统": "12-credit-report",
    "单条产业链图谱": "single",
}

_WHITESPACE = re.compile(r"\s+")
_ARENA_SLUG_STRIP = re.compile("[^a-z0-9\\u4e00-\\u9fa5]+")
_ASCII_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


def _replace_words(text: str, table: dict[str, str]) -> str:
    for key in sorted(table, key=len, reverse=True):
        text = text.replace(key, table[key])
    return text


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def _translate_list(value: str, names: dict[str, str]) -> str:
    return ", ".join(
        names.get(part.strip(), part.strip()) for part in LIST_SEPARATOR.split(value)
    )


def translate_industry(industry: str) -> str:
    """Translate a comma-separated industry list into English names."""
    return _translate_list(industry, INDUSTRY_NAMES)


def translate_category(category: str) -> str:
    """Translate a comma-separated application category list."""
    return _translate_list(category, CATEGORY_NAMES)


def translate_champion(champion: str) -> str:
    """Translate a champion or challenger label.

    Special placeholder values map directly; otherwise deployment prefixes are
    translated and full-width brackets are normalised to tight ASCII ones.
    """
    special = SPECIAL_CHALLENGERS.get(champion)
    if special is not None:
        return special
    result = champion
    for chinese, english in CHAMPION_PREFIXES.items():
        result = result.replace(chinese, english, 1)
    result = re.sub(r"（\s*", "(", result)
    result = re.sub(r"\s*）", ")", result)
    result = re.sub(r"\(\s*", "(", result)
    return re.sub(r"\s*\)", ")", result)


def translate_highlights(highlights: str) -> str:
    """Translate a highlights sentence, falling back to word replacement."""
    sentence = HIGHLIGHT_SENTENCES.get(highlights)
    if sentence is not None:
        return sentence
    result = _replace_words(highlights, HIGHLIGHT_WORDS)
    result = result.replace("、", ", ").replace("，", ", ")
    return _capitalize_first(_WHITESPACE.sub(" ", result).strip())


def translate_metric_value(value: str) -> str:
    """Translate a qualitative metric value, keeping unknown values."""
    return METRIC_VALUES.get(value, value)


def translate_verification_status(status: str) -> str:
    """Translate the verification status, keeping unknown values."""
    return VERIFICATION_STATUSES.get(status, status)


def english_title(chinese_title: str) -> str:
    """Return the English title for an arena's Chinese title."""
    sentence = TITLE_SENTENCES.get(chinese_title)
    if sentence is not None:
        return sentence
    result = _replace_words(chinese_title, TITLE_WORDS)
    result = result.replace("（", "(").replace("）", ")").replace("，", ", ")
    return _capitalize_first(_WHITESPACE.sub(" ", result).strip())


def ascii_slug(text: str) -> str:
    """Return a lowercase kebab-case slug restricted to ASCII letters and digits."""
    return _ASCII_SLUG_STRIP.sub("-", text.lower()).strip("-")


def arena_slug(name: str) -> str:
    """Return the arena identifier, keeping CJK characters in the slug."""
    return _ARENA_SLUG_STRIP.sub("-", name.lower()).strip("-")


def folder_id(chinese_title: str) -> str:
    """Return the content folder for ``chinese_title``.

    A non-empty manual mapping wins; other titles use the slug of their
    English title.
    """
    mapped = FOLDER_IDS.get(chinese_title)
    if mapped:
        return mapped
    return ascii_slug(english_title(chinese_title))


def polish_english_title(title: str) -> str:
    """Replace leftover Chinese connectives and punctuation in an English title."""
    result = title.replace("及", " & ").replace("与", " and ").replace("的", " of ")
    result = result.replace("（", "(").replace("）", ")").replace("，", ", ")
    return _WHITESPACE.sub(" ", result).strip()


__all__ = [
    "CATEGORY_NAMES",
    "CHALLENGER_PLACEHOLDER",
    "FOLDER_IDS",
    "INDUSTRY_NAMES",
    "METRIC_LABELS",
    "METRIC_VALUES",
    "arena_slug",
    "ascii_slug",
    "english_title",
    "folder_id",
    "polish_english_title",
    "translate_category",
    "translate_champion",
    "translate_highlights",
    "translate_industry",
    "translate_metric_value",
    "translate_verification_status",
]
