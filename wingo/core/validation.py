import re

def is_valid_period(s: str | None) -> bool:
    return bool(re.fullmatch(r"\d+", s or ""))
