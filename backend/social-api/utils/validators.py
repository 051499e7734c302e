from __future__ import annotations
import re
from typing import Any, Dict, Mapping, Optional

# 에러가 없으면 None, 있으면 {field: message}

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

TITLE_MAX = 255
BODY_MIN = 1
COMMENT_MAX = 1000
PASSWORD_MIN = 6
NAME_MAX = 100


def _text(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        return str(value)
    return value.strip()


def _result(errors: Dict[str, str]) -> Optional[Dict[str, str]]:
    return errors or None


def post(data: Mapping[str, Any]) -> Optional[Dict[str, str]]:
    errors: Dict[str, str] = {}
    title = _text(data.get("title"))
    body = _text(data.get("body"))

    if not title:
        errors["title"] = "Title field is required."
    elif len(title) > TITLE_MAX:
        errors["title"] = f"Title must be at most {TITLE_MAX} characters."

    if len(body) < BODY_MIN:
        errors["body"] = "Body field is required."

    return _result(errors)


def comment(data: Mapping[str, Any]) -> Optional[Dict[str, str]]:
    errors: Dict[str, str] = {}
    text = _text(data.get("text"))

    if not text:
        errors["text"] = "Comment text is required."
    elif len(text) > COMMENT_MAX:
        errors["text"] = f"Comment must be at most {COMMENT_MAX} characters."

    return _result(errors)


def register(data: Mapping[str, Any]) -> Optional[Dict[str, str]]:
    errors: Dict[str, str] = {}
    email = _text(data.get("email"))
    password = data.get("password") or ""
    password2 = data.get("password2") or ""

    if not email:
        errors["email"] = "Email field is required."
    elif not EMAIL_RE.match(email):
        errors["email"] = "Email is invalid."

    if not password:
        errors["password"] = "Password field is required."
    elif len(password) < PASSWORD_MIN:
        errors["password"] = f"Password must be at least {PASSWORD_MIN} characters."

    if password != password2:
        errors["password2"] = "Passwords must match."

    return _result(errors)


def login(data: Mapping[str, Any]) -> Optional[Dict[str, str]]:
    errors: Dict[str, str] = {}
    email = _text(data.get("email"))

    if not email:
        errors["email"] = "Email field is required."
    elif not EMAIL_RE.match(email):
        errors["email"] = "Email is invalid."
    if not data.get("password"):
        errors["password"] = "Password field is required."

    return _result(errors)


def profile(data: Mapping[str, Any]) -> Optional[Dict[str, str]]:
    errors: Dict[str, str] = {}
    for field, label in (("first_name", "First name"), ("last_name", "Last name")):
        value = _text(data.get(field))
        if not value:
            errors[field] = f"{label} field is required."
        elif len(value) > NAME_MAX:
            errors[field] = f"{label} must be at most {NAME_MAX} characters."

    picture = _text(data.get("profile_picture"))
    if picture and not picture.startswith(("http://", "https://", "/")):
        errors["profile_picture"] = "Profile picture must be a URL."

    return _result(errors)


def ticket(data: Mapping[str, Any]) -> Optional[Dict[str, str]]:
    errors: Dict[str, str] = {}
    if not _text(data.get("subject")):
        errors["subject"] = "Subject field is required."
    if not _text(data.get("message")):
        errors["message"] = "Message field is required."
    return _result(errors)
