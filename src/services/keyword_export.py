import re
from typing import Optional, Sequence, Union
from urllib.parse import quote

from models.domain import KeywordEntry, KeywordFrequency

CSV_HEADERS = ["Keyword", "Search Volume", "CPC", "KD", "Source/Frequency"]
UTF8_BOM = "\ufeff"

_UNSAFE_HEADER_CHARS = re.compile(r'[^\x20-\x7e]|["\\]')


def _quote(text: str) -> str:
    escaped = text.replace('"', '""')
    return f'"{escaped}"'


def _format_number(value: Optional[float]) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _last_column(item: Union[KeywordEntry, KeywordFrequency]) -> str:
    if hasattr(item, "frequency"):
        return str(item.frequency)
    if any(ch in item.source for ch in ',"\n'):
        return _quote(item.source)
    return item.source


def keywords_to_csv(
    keywords: Sequence[Union[KeywordEntry, KeywordFrequency]], bom: bool = False
) -> str:
    """Serialize keyword entries or frequency records as comma-separated text.

    The last column holds the frequency for aggregated records and the
    source brand for plain entries. Missing metrics are left empty.
    """
    rows = [",".join(CSV_HEADERS)]
    for item in keywords:
        row = [
            _quote(item.keyword),
            _format_number(item.search_volume),
            _format_number(item.cpc),
            _format_number(item.kd),
            _last_column(item),
        ]
        rows.append(",".join(row))
    text = "\n".join(rows)
    return UTF8_BOM + text if bom else text


def export_filename(label: str) -> str:
    return f"{label}.csv"


def content_disposition(filename: str) -> str:
    """Attachment header value that survives non-ASCII file names.

    Clients that understand RFC 5987 use the UTF-8 `filename*`; older ones
    fall back to the ASCII `filename` with unsafe characters replaced.
    """
    fallback = _UNSAFE_HEADER_CHARS.sub("_", filename)
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"
