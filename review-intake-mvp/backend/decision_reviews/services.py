import logging
from datetime import date

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from .exceptions import BlockError, CompleteError, IntakeApiError, ReviewError, StartError
from .intake import error_from_error_code
from .intake.validation import (
    is_benefit_type,
    is_boolean,
    is_payee_code,
    is_present,
    parse_date_string,
)
from .models import Claimant, HigherLevelReview, Intake, RequestIssue, Veteran

logger = logging.getLogger(__name__)

_REQUEST_ISSUE_ID_FIELDS = ('contested_decision_issue_id', 'rating_issue_reference_id', 'vacols_id')


def _ama_activation_date():
    return parse_date_string(getattr(settings, 'AMA_ACTIVATION_DATE', '2019-02-19')) or date(2019, 2, 19)


def _optional_str(value):
    return None if value is None else str(value)


def _present_str(value):
    return str(value) if is_present(value) else None


def _too_long(model, field_name, value):
    """value 存进 model.field_name 会超过 max_length 时返回问题描述，否则 None。"""
    if value is None:
        return None
    max_length = model._meta.get_field(field_name).max_length
    if len(str(value)) > max_length:
        return f"{field_name} is longer than {max_length} characters: <{value}>"
    return None


def start_intake(intake_request):
    """
    start 阶段：找到 veteran，确认没有进行中的同类 intake，标记 started_at。
    Returns (intake, veteran)。失败抛 StartError（code 取 intake.error_code）。
    """
    intake = Intake(
        veteran_file_number=intake_request.veteran_file_number,
        form_type='higher_level_review',
    )

    veteran = Veteran.objects.filter(file_number=intake.veteran_file_number).first()
    if veteran is None:
        intake.error_code = 'veteran_not_found'
    elif Intake.objects.filter(
        veteran_file_number=intake.veteran_file_number,
        form_type=intake.form_type,
        started_at__isnull=False,
        completed_at__isnull=True,
    ).exists():
        intake.error_code = 'duplicate_intake_in_progress'

    if intake.error_code:
        logger.warning("[intake][start] veteran=%s 失败: %s", intake.veteran_file_number, intake.error_code)
        raise StartError(
            [error_from_error_code(intake.error_code)],
            detail={'veteran_file_number': intake.veteran_file_number},
        )

    intake.started_at = timezone.now()
    intake.save()
    logger.info("[intake][start] intake=%s veteran=%s", intake.id, intake.veteran_file_number)
    return intake, veteran


def check_review_params(review_params):
    """
    review 参数校验。返回问题描述列表（空列表 = 通过）。

    - receipt_date：YYYY-MM-DD，不能是未来日期，不能早于 AMA 生效日
    - benefit_type：必填且必须是已知 benefit type
    - payee_code：有值时必须合法
    - informal_conference / same_office / legacy_opt_in_approved：有值时必须是 boolean
    - claimant：veteran 不是 claimant 时，participant id 不能超过列宽
    """
    problems = []

    receipt_date = parse_date_string(review_params.get('receipt_date'))
    if receipt_date is None:
        problems.append(f"receipt_date is not a date string: <{review_params.get('receipt_date')}>")
    elif receipt_date > timezone.localdate():
        problems.append(f"receipt_date <{receipt_date}> is in the future")
    elif receipt_date < _ama_activation_date():
        problems.append(f"receipt_date <{receipt_date}> is before the AMA activation date")

    benefit_type = review_params.get('benefit_type')
    if not is_present(benefit_type):
        problems.append("benefit_type is blank")
    else:
        try:
            is_benefit_type(benefit_type, key='benefit_type')
        except ValueError as exc:
            problems.append(str(exc))

    payee_code = review_params.get('payee_code')
    if is_present(payee_code):
        try:
            is_payee_code(payee_code, key='payee_code')
        except ValueError as exc:
            problems.append(str(exc))

    for key in ('informal_conference', 'same_office', 'legacy_opt_in_approved'):
        value = review_params.get(key)
        if value is not None and not is_boolean(value, exception=None):
            problems.append(f"{key} is not a boolean: <{value}>")

    if review_params.get('veteran_is_not_claimant'):
        problem = _too_long(Claimant, 'participant_id', review_params.get('claimant'))
        if problem:
            problems.append(f"claimant {problem}")

    return problems


def review_intake(intake, veteran, review_params):
    """review 阶段：校验参数，创建 HigherLevelReview + Claimant。失败抛 ReviewError。"""
    problems = check_review_params(review_params)
    if problems:
        logger.warning("[intake][review] intake=%s 失败: %s", intake.id, problems)
        raise ReviewError(
            [error_from_error_code('intake_review_failed')],
            message="Intake review failed:\n" + "\n".join(problems),
            detail={'errors': problems},
        )

    review = HigherLevelReview.objects.create(
        veteran_file_number=intake.veteran_file_number,
        receipt_date=parse_date_string(review_params['receipt_date']),
        benefit_type=review_params['benefit_type'],
        informal_conference=bool(review_params.get('informal_conference')),
        same_office=bool(review_params.get('same_office')),
        legacy_opt_in_approved=bool(review_params.get('legacy_opt_in_approved')),
        veteran_is_not_claimant=bool(review_params.get('veteran_is_not_claimant')),
    )

    if review.veteran_is_not_claimant:
        Claimant.objects.create(
            decision_review=review,
            participant_id=_optional_str(review_params.get('claimant')),
            payee_code=review_params.get('payee_code') or None,
        )
    else:
        Claimant.objects.create(decision_review=review, participant_id=veteran.participant_id)

    intake.detail = review
    intake.save(update_fields=['detail'])
    logger.info("[intake][review] intake=%s review=%s", intake.id, review.id)
    return review


def complete_intake(intake, complete_params):
    """
    complete 阶段：每个 normalized issue 落一条 RequestIssue。
    decision_date 不合法或 id 超过列宽时抛 CompleteError，一条都不落库。
    """
    review = intake.detail
    request_issues = complete_params.get('request_issues') or []

    intake.completion_started_at = timezone.now()

    problems = []
    decision_dates = []
    for i, issue in enumerate(request_issues):
        raw_date = issue.get('decision_date')
        parsed = parse_date_string(raw_date) if is_present(raw_date) else None
        if is_present(raw_date) and parsed is None:
            problems.append(f"request_issues[{i}].decision_date is not a date string: <{raw_date}>")
        for field_name in _REQUEST_ISSUE_ID_FIELDS:
            problem = _too_long(RequestIssue, field_name, issue.get(field_name))
            if problem:
                problems.append(f"request_issues[{i}].{problem}")
        decision_dates.append(parsed)

    if problems:
        logger.warning("[intake][complete] intake=%s 失败: %s", intake.id, problems)
        raise CompleteError(
            [error_from_error_code('intake_complete_failed')],
            message="Intake couldn't be completed:\n" + "\n".join(problems),
            detail={'errors': problems},
        )

    for position, (issue, decision_date) in enumerate(zip(request_issues, decision_dates)):
        RequestIssue.objects.create(
            decision_review=review,
            position=position,
            benefit_type=issue.get('benefit_type') or review.benefit_type,
            is_unidentified=bool(issue.get('is_unidentified')),
            contested_decision_issue_id=_optional_str(issue.get('contested_decision_issue_id')),
            rating_issue_reference_id=_optional_str(issue.get('rating_issue_reference_id')),
            vacols_id=_optional_str(issue.get('vacols_id')),
            nonrating_issue_category=issue.get('nonrating_issue_category'),
            decision_date=decision_date,
            decision_text=_present_str(issue.get('decision_text')),
            notes=_present_str(issue.get('notes')),
        )

    now = timezone.now()
    review.establishment_submitted_at = now
    review.save(update_fields=['establishment_submitted_at', 'updated_at'])

    intake.completed_at = now
    intake.completion_status = 'success'
    intake.save(update_fields=['completion_started_at', 'completed_at', 'completion_status'])
    logger.info("[intake][complete] intake=%s request_issues=%d", intake.id, len(request_issues))
    return review


def start_review_complete(processor):
    """
    start → review → complete，整体在一个事务里。
    Returns HigherLevelReview。
    Raises IntakeApiError（batch 有校验错误）/ StartError / ReviewError / CompleteError。
    View 层不需要处理，exception_handler 统一兜底。
    """
    if processor.has_errors:
        raise IntakeApiError(processor.errors)

    with transaction.atomic():
        intake, veteran = start_intake(processor.request)
        review_intake(intake, veteran, processor.review_params())
        return complete_intake(intake, processor.complete_params())


def get_higher_level_review(review_id):
    """Get review by ID. Raises BlockError if not found."""
    try:
        return HigherLevelReview.objects.prefetch_related('request_issues', 'claimants').get(id=review_id)
    except HigherLevelReview.DoesNotExist:
        raise BlockError(
            message='Higher Level Review not found',
            code='HIGHER_LEVEL_REVIEW_NOT_FOUND',
            detail={'higher_level_review_id': str(review_id)},
            http_status=404,
        )
