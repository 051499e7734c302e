from __future__ import annotations
import json
from typing import Any, List


def load_list(raw: Any) -> List[Any]:
    """
    JSON 텍스트 컬럼 -> list.
    파싱 실패 또는 list 가 아닌 값이면 빈 리스트로 취급합니다.
    """
    if isinstance(raw, list):
        return list(raw)
    if raw is None:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return []
    return value if isinstance(value, list) else []
