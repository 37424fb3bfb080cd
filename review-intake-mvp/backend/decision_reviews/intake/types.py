"""
Intake 层的标准数据结构。

IntakeRequest / RawIssueRecord 是请求体解析后的不可变表示；
IntakeError 是单条错误的 (status, code, title) 三元组；
ProcessingResult 累积整个 batch 的成功 issue 和错误。

业务层（services.py）只消费这些结构，永远不碰原始请求体。
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class IntakeError:
    status: int
    code: str
    title: str

    def as_json(self) -> dict[str, Any]:
        # wire 格式：键顺序固定为 status, code, title
        return {"status": self.status, "code": self.code, "title": self.title}


@dataclass(frozen=True)
class RawIssueRecord:
    """included 里的一条 RequestIssue，字段原样保留（可能是 None / False / 数字）。"""

    contests: Any = None
    id: Any = None
    notes: Any = None
    category: Any = None
    decision_date: Any = None
    decision_text: Any = None


@dataclass(frozen=True)
class IntakeRequest:
    """
    一次 V3 请求的顶层输入。

    veteran_file_number  来自 data.relationships.veteran.data.id
    claimant_*           来自 data.relationships.claimant（可选）
    issues               included 中 type == "RequestIssue" 的记录，保持原顺序
    """

    veteran_file_number: str
    benefit_type: Any = None
    receipt_date: Any = None
    informal_conference: Any = None
    same_office: Any = None
    legacy_opt_in_approved: Any = None
    claimant_participant_id: Any = None
    claimant_payee_code: Any = None
    issues: tuple[RawIssueRecord, ...] = ()


# NormalizedIssue 就是一个扁平 dict，键集合完全由 contestation kind 决定。
NormalizedIssue = dict[str, Any]


@dataclass
class ProcessingResult:
    issues: list[NormalizedIssue] = field(default_factory=list)
    errors: list[IntakeError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def add(self, value: "NormalizedIssue | IntakeError") -> None:
        if isinstance(value, IntakeError):
            self.errors.append(value)
        else:
            self.issues.append(value)
