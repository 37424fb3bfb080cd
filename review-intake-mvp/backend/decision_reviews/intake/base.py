"""
BaseIssueValidator: 每种 contestation kind 的校验器基类。

每种新的 kind 只需：
1. 继承 BaseIssueValidator
2. 实现 check() 和 transform()
3. 在 factory.py 的 _build_registry 注册一行

processor 无需任何改动。
"""

from abc import ABC, abstractmethod

from .errors import error_from_error_code
from .types import IntakeError, NormalizedIssue, RawIssueRecord


class BaseIssueValidator(ABC):
    """
    两步流水线：check → transform

    check() 按固定顺序检查字段，返回第一个失败的 error code（全部通过返回 None）；
    transform() 只在 check 通过后调用，返回该 kind 的 NormalizedIssue。
    """

    # 子类声明自己对应的 contests 值（与 factory 注册键一致）
    contests: str = ""

    def __init__(self, benefit_type=None, legacy_opt_in_approved=None):
        self.benefit_type = benefit_type
        self.legacy_opt_in_approved = legacy_opt_in_approved

    # ── 必须实现 ───────────────────────────────────────────────────────────

    @abstractmethod
    def check(self, record: RawIssueRecord) -> str | None:
        """返回第一个失败条件的 error code；通过返回 None。"""

    @abstractmethod
    def transform(self, record: RawIssueRecord) -> NormalizedIssue:
        """返回该 kind 专属字段（不含 is_unidentified / benefit_type 公共字段）。"""

    # ── 对外统一入口 ───────────────────────────────────────────────────────

    def intake_data(self, **fields) -> NormalizedIssue:
        return {"is_unidentified": False, "benefit_type": self.benefit_type, **fields}

    def process(self, record: RawIssueRecord) -> NormalizedIssue | IntakeError:
        """check → transform，返回 NormalizedIssue 或 IntakeError，不抛异常。"""
        code = self.check(record)
        if code is not None:
            return error_from_error_code(code)
        return self.transform(record)
