import re

SUPPORTED_EXTENSIONS = (".xlsx", ".xls", ".csv")

BRAND_NAME_SUFFIX_PATTERN = re.compile(r"\.(xlsx|xls|csv)$", re.IGNORECASE)

KEYWORD_COLUMN_PATTERNS = [r"keyword", r"关键词", r"query", r"term"]
SEARCH_VOLUME_COLUMN_PATTERNS = [r"search.*volume", r"sv", r"搜索量", r"volume", r"流量"]
CPC_COLUMN_PATTERNS = [r"cpc", r"cost", r"点击成本"]
KD_COLUMN_PATTERNS = [r"kd", r"difficulty", r"难度"]

COLUMN_PATTERNS = {
    "keyword": [re.compile(p, re.IGNORECASE) for p in KEYWORD_COLUMN_PATTERNS],
    "search_volume": [re.compile(p, re.IGNORECASE) for p in SEARCH_VOLUME_COLUMN_PATTERNS],
    "cpc": [re.compile(p, re.IGNORECASE) for p in CPC_COLUMN_PATTERNS],
    "kd": [re.compile(p, re.IGNORECASE) for p in KD_COLUMN_PATTERNS],
}

BRAND_FRAGMENT_SEPARATORS = re.compile(r"[\s\-_]+")
