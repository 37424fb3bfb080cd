"""
具体 contestation kind 的校验器。

已注册：
  on_file_decision_issue -> DecisionIssueValidator
  on_file_rating_issue   -> RatingIssueValidator
  on_file_legacy_issue   -> LegacyIssueValidator
  other（有 category）    -> CategorizedOtherValidator
  other（无 category）    -> UncategorizedOtherValidator
"""

from .base import BaseIssueValidator
from .constants import (
    CONTESTS_DECISION_ISSUE,
    CONTESTS_LEGACY_ISSUE,
    CONTESTS_OTHER,
    CONTESTS_RATING_ISSUE,
)
from .types import NormalizedIssue, RawIssueRecord
from .validation import any_present, is_blank, is_nonrating_issue_category_for_benefit_type


# ── on_file_* ──────────────────────────────────────────────────────────────
#
# 三种 on_file kind 的规则完全一样：先查 id，再查 notes。
# 区别只在 error code 的后缀和输出时 id 落到哪个键。

class _OnFileIssueValidator(BaseIssueValidator):
    issue_label: str = ""
    id_field: str = ""

    def check(self, record: RawIssueRecord) -> str | None:
        if is_blank(record.id):
            return f"must_have_id_to_contest_{self.issue_label}_issue"
        if is_blank(record.notes):
            return f"notes_cannot_be_blank_when_contesting_{self.issue_label}_issue"
        return None

    def transform(self, record: RawIssueRecord) -> NormalizedIssue:
        return self.intake_data(**{self.id_field: record.id, "notes": record.notes})


class DecisionIssueValidator(_OnFileIssueValidator):
    contests = CONTESTS_DECISION_ISSUE
    issue_label = "decision"
    id_field = "contested_decision_issue_id"


class RatingIssueValidator(_OnFileIssueValidator):
    contests = CONTESTS_RATING_ISSUE
    issue_label = "rating"
    id_field = "rating_issue_reference_id"


class LegacyIssueValidator(_OnFileIssueValidator):
    contests = CONTESTS_LEGACY_ISSUE
    issue_label = "legacy"
    id_field = "vacols_id"

    def check(self, record: RawIssueRecord) -> str | None:
        # opt-in 在 id / notes 之前检查
        if self.legacy_opt_in_approved is not True:
            return "adding_legacy_issue_without_opting_in"
        return super().check(record)


# ── other ──────────────────────────────────────────────────────────────────
#
# notes / decision_text 至少有一个 present。
# 有 category 时还要求 category 在该 benefit type 的 allow-list 里（先查）。

TEXT_PRESENCE_ERROR = "either_notes_or_decision_text_must_be_present_when_contesting_other"


def _has_text(record: RawIssueRecord) -> bool:
    return any_present(record.notes, record.decision_text, keys=("notes", "decision_text"), exception=None)


class CategorizedOtherValidator(BaseIssueValidator):
    contests = CONTESTS_OTHER

    def check(self, record: RawIssueRecord) -> str | None:
        if not is_nonrating_issue_category_for_benefit_type(record.category, self.benefit_type, exception=None):
            return "unknown_category_for_benefit_type"
        if not _has_text(record):
            return TEXT_PRESENCE_ERROR
        return None

    def transform(self, record: RawIssueRecord) -> NormalizedIssue:
        return self.intake_data(
            notes=record.notes,
            decision_date=record.decision_date,
            decision_text=record.decision_text,
            nonrating_issue_category=record.category,
        )


class UncategorizedOtherValidator(BaseIssueValidator):
    contests = CONTESTS_OTHER

    def check(self, record: RawIssueRecord) -> str | None:
        if not _has_text(record):
            return TEXT_PRESENCE_ERROR
        return None

    def transform(self, record: RawIssueRecord) -> NormalizedIssue:
        data = self.intake_data(
            notes=record.notes,
            decision_date=record.decision_date,
            decision_text=record.decision_text,
        )
        data["is_unidentified"] = True
        return data
