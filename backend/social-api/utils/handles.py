from __future__ import annotations


def generate_handle(title: str) -> str:
    """
    제목 -> handle.
    소문자 변환 후 공백 하나 단위로 잘라 '-' 로 연결합니다. 유니크 보장은 하지 않습니다.
    """
    return "-".join((title or "").lower().split(" "))
