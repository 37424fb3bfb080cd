"""
Contestation classifier：根据 RawIssueRecord.contests 返回对应的校验器。

新增 contestation kind 只需：
  1. 在 validators.py 新建校验器类
  2. 在此处 _build_registry 加一行
  不需要修改 processor。
"""

from .base import BaseIssueValidator
from .types import RawIssueRecord
from .validation import is_present


# ── 注册表 ──────────────────────────────────────────────────────────────────
# key: contests 字符串（大小写敏感，精确匹配）
# value: 校验器类（未实例化）；"other" 是 (有 category, 无 category) 二选一
def _build_registry() -> dict[str, type[BaseIssueValidator] | tuple[type[BaseIssueValidator], ...]]:
    from .validators import (
        CategorizedOtherValidator,
        DecisionIssueValidator,
        LegacyIssueValidator,
        RatingIssueValidator,
        UncategorizedOtherValidator,
    )

    return {
        DecisionIssueValidator.contests: DecisionIssueValidator,
        RatingIssueValidator.contests:   RatingIssueValidator,
        LegacyIssueValidator.contests:   LegacyIssueValidator,
        CategorizedOtherValidator.contests: (CategorizedOtherValidator, UncategorizedOtherValidator),
    }


_REGISTRY = _build_registry()


def get_issue_validator(
    record: RawIssueRecord,
    benefit_type=None,
    legacy_opt_in_approved=None,
) -> BaseIssueValidator | None:
    """
    根据 record.contests 返回已实例化的校验器。

    Args:
        record:                 一条 RequestIssue
        benefit_type:           batch 的 benefit type
        legacy_opt_in_approved: batch 的 legacy opt-in 标志

    Returns:
        校验器实例；contests 不认识（包括 None / 非字符串）返回 None，
        由调用方换成 unknown_contestation_type 错误。
    """
    if not isinstance(record.contests, str):
        return None

    entry = _REGISTRY.get(record.contests)
    if entry is None:
        return None

    if isinstance(entry, tuple):
        categorized, uncategorized = entry
        validator_cls = categorized if is_present(record.category) else uncategorized
    else:
        validator_cls = entry

    return validator_cls(benefit_type=benefit_type, legacy_opt_in_approved=legacy_opt_in_approved)
