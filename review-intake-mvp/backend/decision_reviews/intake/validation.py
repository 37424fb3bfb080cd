"""
共用校验谓词。

is_blank / is_present 是整个 intake 层唯一的“空值”判定：
None、False、空字符串、纯空白字符串、空 list/tuple/dict 都算 blank。

其余谓词都接受 exception 参数：
  - exception=ValueError（默认）：校验失败时 raise，消息里带上 key
  - exception=None：校验失败时只返回 False
"""

import re
from collections.abc import Mapping
from datetime import date

from .constants import BENEFIT_TYPES, PAYEE_CODES, categories_for_benefit_type

INT_STRING_RE = re.compile(r"^\s*[-+]?\d+\s*$")
DATE_STRING_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)


def is_blank(value) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def is_present(value) -> bool:
    return not is_blank(value)


def _join_present(*parts) -> str:
    return " ".join(str(p) for p in parts if is_present(p))


def _fail(exception, key, message):
    if exception:
        raise exception(_join_present(key, message))
    return False


def is_int(value, key=None, exception=ValueError) -> bool:
    if isinstance(value, bool):
        return _fail(exception, key, f"isn't an int : <{value}>")
    if isinstance(value, int) or (isinstance(value, float) and value.is_integer()):
        return True
    return _fail(exception, key, f"isn't an int : <{value}>")


def is_int_or_int_string(value, key=None, exception=ValueError) -> bool:
    if is_int(value, exception=None):
        return True
    if isinstance(value, str) and INT_STRING_RE.match(value):
        return True
    return _fail(
        exception, key, f"is neither an int nor a string that can be converted to an int: <{value}>"
    )


def is_string(value, key=None, exception=ValueError) -> bool:
    return isinstance(value, str) or _fail(exception, key, f"is not a string: <{value}>")


def is_nullable_string(value, key=None, exception=ValueError) -> bool:
    return value is None or is_string(value, key=key, exception=exception)


def parse_date_string(value):
    """"YYYY-MM-DD" → date；格式不对或日期不存在返回 None。"""
    if not isinstance(value, str):
        return None
    if not DATE_STRING_RE.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def is_date_string(value, key=None, exception=ValueError) -> bool:
    if parse_date_string(value) is not None:
        return True
    return _fail(exception, key, f"is not a date string: <{value}>")


def is_nullable_date_string(value, key=None, exception=ValueError) -> bool:
    return value is None or is_date_string(value, key=key, exception=exception)


def is_boolean(value, key=None, exception=ValueError) -> bool:
    return isinstance(value, bool) or _fail(exception, key, f"is not a boolean: <{value}>")


def is_true(value, key=None, exception=ValueError) -> bool:
    return value is True or _fail(exception, key, f"is not true: <{value}>")


def is_benefit_type(value, key=None, exception=ValueError) -> bool:
    """None 视为合法（nullable）。"""
    if value is None or (isinstance(value, str) and value in BENEFIT_TYPES):
        return True
    return _fail(exception, key, f"is not a benefit type (line of business): <{value}>")


def is_nonrating_issue_category_for_benefit_type(category, benefit_type, exception=ValueError) -> bool:
    if category is None or category in categories_for_benefit_type(benefit_type):
        return True
    if exception:
        raise exception(f"<{category}> is not a valid category for benefit_type: <{benefit_type}>")
    return False


def is_payee_code(value, key=None, exception=ValueError) -> bool:
    if isinstance(value, str) and value in PAYEE_CODES:
        return True
    return _fail(exception, key, f"is not a valid payee code: <{value}>")


def any_present(*values, keys, exception=ValueError) -> bool:
    if any(is_present(v) for v in values):
        return True
    if exception:
        raise exception(f"at least one must be present: {list(keys)}")
    return False


def _extra_keys(mapping: Mapping, expected_keys) -> list:
    return [k for k in mapping if k not in expected_keys]


def _missing_keys(mapping: Mapping, expected_keys) -> list:
    return [k for k in expected_keys if k not in mapping]


def hash_keys_are_within_this_set(mapping, keys, exception=ValueError) -> bool:
    extras = _extra_keys(mapping, keys)
    if not extras:
        return True
    if exception:
        raise exception(f"hash has extra keys: {extras}")
    return False


def hash_has_at_least_these_keys(mapping, keys, exception=ValueError) -> bool:
    missing = _missing_keys(mapping, keys)
    if not missing:
        return True
    if exception:
        raise exception(f"hash is missing keys: {missing}")
    return False


def these_are_the_hash_keys(mapping, keys, exception=ValueError) -> bool:
    extras = _extra_keys(mapping, keys)
    missing = _missing_keys(mapping, keys)
    if not extras and not missing:
        return True
    if exception:
        raise exception(_join_present(
            extras and f"hash has extra keys: {extras}",
            missing and f"hash is missing keys: {missing}",
        ))
    return False
