"""
Словари гостиничного домена: бренды, удобства, гео-суффиксы, типы объектов.
"""

from __future__ import annotations

import re
from typing import Dict, FrozenSet, Tuple

# Бренд (китайское название) -> английское название
HOTEL_BRANDS: Dict[str, str] = {
    "希尔顿": "Hilton",
    "万豪": "Marriott",
    "洲际": "InterContinental",
    "凯悦": "Hyatt",
    "香格里拉": "Shangri-La",
    "四季": "Four Seasons",
    "喜来登": "Sheraton",
    "威斯汀": "Westin",
    "瑞吉": "St. Regis",
    "假日": "Holiday Inn",
    "皇冠假日": "Crowne Plaza",
    "丽思卡尔顿": "Ritz-Carlton",
    "万丽": "Renaissance",
    "万怡": "Courtyard",
    "福朋喜来登": "Four Points",
    "艾美": "Le Meridien",
    "W酒店": "W Hotels",
    "索菲特": "Sofitel",
    "诺富特": "Novotel",
    "美居": "Mercure",
    "宜必思": "ibis",
    "铂尔曼": "Pullman",
    "英迪格": "Hotel Indigo",
    "智选假日": "Holiday Inn Express",
    "华尔道夫": "Waldorf Astoria",
    "康莱德": "Conrad",
    "逸林": "DoubleTree",
    "汉普顿": "Hampton",
    "安达仕": "Andaz",
    "柏悦": "Park Hyatt",
    "君悦": "Grand Hyatt",
    "文华东方": "Mandarin Oriental",
    "半岛": "The Peninsula",
    "悦榕庄": "Banyan Tree",
    "安缦": "Aman",
    "如家": "Home Inn",
    "汉庭": "Hanting",
    "全季": "JI Hotel",
    "亚朵": "Atour",
    "锦江之星": "Jinjiang Inn",
    "维也纳": "Vienna Hotel",
    "7天": "7 Days Inn",
    "桔子": "Orange Hotel",
}

BRAND_WORD_TAG = "nb"

# Общие маркеры гостиничных названий (сохраняются при постобработке)
HOTEL_TYPE_WORDS: Tuple[str, ...] = (
    "酒店", "宾馆", "饭店", "度假村", "名宿", "民宿", "快捷", "连锁", "国际",
    "大酒店", "旅馆", "客栈", "公寓",
)

LOCATION_SUFFIXES: Tuple[str, ...] = (
    "市", "区", "县", "省", "路", "街", "大道", "广场", "中心", "站", "机场",
    "火车站", "汽车站", "码头", "公园", "景区", "景点", "商圈", "购物中心",
    "步行街", "夜市", "地标", "地铁",
)

FACILITY_KEYWORDS: FrozenSet[str] = frozenset({
    "游泳池", "泳池", "健身房", "停车场", "免费停车", "早餐", "自助早餐", "餐厅",
    "酒吧", "会议室", "商务中心", "水疗", "温泉", "无线网络", "WiFi", "wifi",
    "接机", "送机", "行李寄存", "洗衣", "儿童乐园", "海景", "江景", "湖景",
})

NUMBER_WITH_UNIT = re.compile(r".*\d+.*(星|级|公里|米|km|m|分钟|小时).*")


def is_number_with_unit(word: str) -> bool:
    return bool(NUMBER_WITH_UNIT.match(word))


def is_brand_word(word: str) -> bool:
    return any(brand in word for brand in HOTEL_BRANDS) or any(marker in word for marker in HOTEL_TYPE_WORDS)


def is_location_word(word: str) -> bool:
    return any(suffix in word for suffix in LOCATION_SUFFIXES)


def brand_english_names(text: str) -> Dict[str, str]:
    """Brands mentioned in `text` (Chinese or English spelling) -> English name."""
    found: Dict[str, str] = {}
    lowered = text.lower()
    for chinese, english in HOTEL_BRANDS.items():
        if chinese in text or re.search(rf"\b{re.escape(english.lower())}\b", lowered):
            found[chinese] = english
    return found
