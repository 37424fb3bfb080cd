"""
HigherLevelReviewProcessor: V3 请求体 → IntakeRequest → ProcessingResult。

请求体结构（JSON:API 风格）:
{
  "data": {
    "type": "HigherLevelReview",
    "attributes": {
      "receiptDate": "2019-07-10",
      "informalConference": true,
      "sameOffice": false,
      "legacyOptInApproved": true,
      "benefitType": "pension"
    },
    "relationships": {
      "veteran":  { "data": { "type": "Veteran", "id": "64205050" } },
      "claimant": { "data": { "type": "Claimant", "id": "44", "meta": { "payeeCode": "10" } } }
    }
  },
  "included": [
    { "type": "RequestIssue", "attributes": { "contests": "other", "category": "...", "notes": "..." } }
  ]
}

顶层结构缺失 → MalformedRequestError（400），在逐条校验之前失败。
单条 issue 有问题 → 变成 IntakeError 进 errors 列表，永不抛异常。
"""

import logging
from collections.abc import Mapping

from ..exceptions import MalformedRequestError
from .constants import REQUEST_ISSUE_TYPE
from .errors import error_from_error_code
from .factory import get_issue_validator
from .types import IntakeError, IntakeRequest, NormalizedIssue, ProcessingResult, RawIssueRecord
from .validation import is_blank, is_present

logger = logging.getLogger(__name__)


def _dig(mapping, *keys):
    """逐层取值，中途遇到非 Mapping 返回 None。"""
    value = mapping
    for key in keys:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def _require_mapping(value, path: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise MalformedRequestError(
            message=f"Request is missing required object: {path}.",
            detail={"path": path},
        )
    return value


def parse_issue_record(included_item: Mapping) -> RawIssueRecord:
    attributes = included_item.get("attributes")
    if not isinstance(attributes, Mapping):
        attributes = {}
    return RawIssueRecord(
        contests=attributes.get("contests"),
        id=attributes.get("id"),
        notes=attributes.get("notes"),
        category=attributes.get("category"),
        decision_date=attributes.get("decision_date"),
        decision_text=attributes.get("decision_text"),
    )


def parse_intake_request(params) -> IntakeRequest:
    """
    请求体 → IntakeRequest。

    Raises:
        MalformedRequestError: data / attributes / relationships / veteran id / included 缺失
    """
    params = _require_mapping(params, "body")
    data = _require_mapping(params.get("data"), "data")
    attributes = _require_mapping(data.get("attributes"), "data.attributes")
    relationships = _require_mapping(data.get("relationships"), "data.relationships")

    veteran_file_number = _dig(relationships, "veteran", "data", "id")
    if is_blank(veteran_file_number) or isinstance(veteran_file_number, (Mapping, list, bool)):
        raise MalformedRequestError(
            message="Request is missing required value: data.relationships.veteran.data.id.",
            detail={"path": "data.relationships.veteran.data.id"},
        )

    included = params.get("included")
    if not isinstance(included, list):
        raise MalformedRequestError(
            message="Request is missing required array: included.",
            detail={"path": "included"},
        )

    issues = tuple(
        parse_issue_record(item)
        for item in included
        if isinstance(item, Mapping) and item.get("type") == REQUEST_ISSUE_TYPE
    )

    return IntakeRequest(
        veteran_file_number=str(veteran_file_number).strip(),
        benefit_type=attributes.get("benefitType"),
        receipt_date=attributes.get("receiptDate"),
        informal_conference=attributes.get("informalConference"),
        same_office=attributes.get("sameOffice"),
        legacy_opt_in_approved=attributes.get("legacyOptInApproved"),
        claimant_participant_id=_dig(relationships, "claimant", "data", "id"),
        claimant_payee_code=_dig(relationships, "claimant", "data", "meta", "payeeCode"),
        issues=issues,
    )


def issue_to_intake_data(
    record: RawIssueRecord,
    benefit_type=None,
    legacy_opt_in_approved=None,
) -> NormalizedIssue | IntakeError:
    """单条 record：classify → validate。返回 NormalizedIssue 或 IntakeError。"""
    validator = get_issue_validator(
        record, benefit_type=benefit_type, legacy_opt_in_approved=legacy_opt_in_approved
    )
    if validator is None:
        return error_from_error_code("unknown_contestation_type")
    return validator.process(record)


class HigherLevelReviewProcessor:
    """
    构造时即完成解析 + 整个 batch 的校验。

    - issues / errors 分别保持输入顺序
    - 有错误时依然暴露部分成功的 issues，由 HTTP 层决定怎么渲染
    - 不负责落库；start → review → complete 在 services.start_review_complete()
    """

    def __init__(self, params):
        self.request = parse_intake_request(params)
        self.result = ProcessingResult()

        for record in self.request.issues:
            self.result.add(issue_to_intake_data(
                record,
                benefit_type=self.request.benefit_type,
                legacy_opt_in_approved=self.request.legacy_opt_in_approved,
            ))

        logger.info(
            "[intake] veteran=%s benefit_type=%s issues=%d errors=%d",
            self.request.veteran_file_number,
            self.request.benefit_type,
            len(self.result.issues),
            len(self.result.errors),
        )

    @property
    def issues(self) -> list[NormalizedIssue]:
        return self.result.issues

    @property
    def errors(self) -> list[IntakeError]:
        return self.result.errors

    @property
    def has_errors(self) -> bool:
        return self.result.has_errors

    def review_params(self) -> dict:
        """review 阶段的参数。"""
        request = self.request
        return {
            "informal_conference": request.informal_conference,
            "same_office": request.same_office,
            "benefit_type": request.benefit_type,
            "receipt_date": request.receipt_date,
            "claimant": request.claimant_participant_id,
            "veteran_is_not_claimant": (
                is_present(request.claimant_participant_id) or is_present(request.claimant_payee_code)
            ),
            "payee_code": request.claimant_payee_code,
            "legacy_opt_in_approved": request.legacy_opt_in_approved,
        }

    def complete_params(self) -> dict:
        """complete 阶段的参数。"""
        return {"request_issues": list(self.result.issues)}
