"""
V3 intake 错误表：code → IntakeError(status, code, title)。

ERRORS_BY_CODE 在模块加载时从下面的字面量表构建一次：
  { status: [(title, code 或 None), ...] }
没写 code 的条目，由 title 推导（小写、空格换下划线、去掉 [0-9a-z_] 以外的字符）。
"""

import re
from enum import Enum
from types import MappingProxyType

from .types import IntakeError

_NON_CODE_CHARS_RE = re.compile(r"[^0-9a-z_]")


def code_from_title(title: str) -> str:
    return _NON_CODE_CHARS_RE.sub("", "_".join(title.split(" ")).lower())


_ERROR_TABLE = {
    403: [("You don't have permission to view this veteran's information", "veteran_not_accessible")],
    404: [("Veteran not found", None)],
    409: [("Intake In progress", "duplicate_intake_in_progress")],
    422: [
        ("The veteran's profile has missing or invalid information required to create an EP.", "veteran_not_valid"),
        ("Veteran ID not found", "invalid_file_number"),
        ("The veteran has multiple active phone numbers", "veteran_has_multiple_phone_numbers"),
        ("You don't have permission to intake this veteran", "veteran_not_modifiable"),
        ("Invalid veteran file number", "reserved_veteran_file_number"),
        ("The veteran has an incident flash", "incident_flash"),
        ("Adding legacy issue without opting in", None),
        ("Unknown category for benefit type", None),
        ("Cannot contest that type", "unknown_contestation_type"),
        ("Must have id to contest decision issue", None),
        ("Must have id to contest rating issue", None),
        ("Must have id to contest legacy issue", None),
        ("Notes cannot be blank when contesting decision issue", None),
        ("Notes cannot be blank when contesting rating issue", None),
        ("Notes cannot be blank when contesting legacy issue", None),
        ("Either notes or decision text must be present when contesting other", None),
        ("Intake couldn't be started", "intake_start_failed"),
        ("Intake review failed", "intake_review_failed"),
        ("Intake couldn't be completed", "intake_complete_failed"),
    ],
}


def _build_errors_by_code(table) -> MappingProxyType:
    errors = {}
    for status, entries in table.items():
        for title, code in entries:
            code = code or code_from_title(title)
            errors[code] = IntakeError(status, code, title)
    return MappingProxyType(errors)


ERRORS_BY_CODE = _build_errors_by_code(_ERROR_TABLE)

ERROR_FOR_UNKNOWN_CODE = IntakeError(422, "unknown_error", "Unknown error")


def error_from_error_code(code) -> IntakeError:
    """
    按 code 查表；查不到（包括 None、False、list、dict 等非字符串）一律返回
    ERROR_FOR_UNKNOWN_CODE，不抛异常。
    """
    if isinstance(code, Enum):
        code = code.value
    if not isinstance(code, str):
        return ERROR_FOR_UNKNOWN_CODE
    return ERRORS_BY_CODE.get(code, ERROR_FOR_UNKNOWN_CODE)
