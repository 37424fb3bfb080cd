"""
Unit tests for the service layer.

覆盖：start_intake, check_review_params, review_intake, complete_intake,
start_review_complete（事务回滚）, get_higher_level_review。
"""
import pytest
import uuid
from datetime import date, timedelta

from django.test import override_settings
from django.utils import timezone

from decision_reviews.exceptions import BlockError, CompleteError, IntakeApiError, ReviewError, StartError
from decision_reviews.intake import HigherLevelReviewProcessor
from decision_reviews.models import Claimant, HigherLevelReview, Intake, RequestIssue
from decision_reviews.services import (
    check_review_params,
    complete_intake,
    get_higher_level_review,
    review_intake,
    start_intake,
    start_review_complete,
)
from tests.conftest import (
    PENSION_OTHER_ISSUE,
    HigherLevelReviewFactory,
    IntakeFactory,
    RequestIssueFactory,
    VeteranFactory,
    build_payload,
)


def valid_review_params(**overrides):
    params = {
        'informal_conference': True,
        'same_office': False,
        'benefit_type': 'pension',
        'receipt_date': '2019-07-10',
        'claimant': None,
        'veteran_is_not_claimant': False,
        'payee_code': None,
        'legacy_opt_in_approved': True,
    }
    params.update(overrides)
    return params


@pytest.mark.django_db
class TestStartIntake:

    def test_existing_veteran(self):
        veteran = VeteranFactory(file_number='64205050')
        processor = HigherLevelReviewProcessor(build_payload([PENSION_OTHER_ISSUE]))

        intake, found = start_intake(processor.request)

        assert found == veteran
        assert intake.started_at is not None
        assert intake.completed_at is None
        assert Intake.objects.filter(veteran_file_number='64205050').count() == 1

    def test_unknown_veteran_raises(self):
        processor = HigherLevelReviewProcessor(build_payload([PENSION_OTHER_ISSUE], veteran_file_number='1'))

        with pytest.raises(StartError) as exc_info:
            start_intake(processor.request)

        assert exc_info.value.code == 'veteran_not_found'
        assert exc_info.value.http_status == 404
        assert Intake.objects.count() == 0

    def test_intake_in_progress_raises(self):
        VeteranFactory(file_number='64205050')
        IntakeFactory(veteran_file_number='64205050', started_at=timezone.now())
        processor = HigherLevelReviewProcessor(build_payload([PENSION_OTHER_ISSUE]))

        with pytest.raises(StartError) as exc_info:
            start_intake(processor.request)

        assert exc_info.value.code == 'duplicate_intake_in_progress'
        assert exc_info.value.http_status == 409

    def test_completed_intake_does_not_block(self):
        VeteranFactory(file_number='64205050')
        IntakeFactory(
            veteran_file_number='64205050',
            started_at=timezone.now(),
            completed_at=timezone.now(),
            completion_status='success',
        )
        processor = HigherLevelReviewProcessor(build_payload([PENSION_OTHER_ISSUE]))

        intake, _ = start_intake(processor.request)
        assert intake.pk is not None


class TestCheckReviewParams:

    def test_valid(self):
        assert check_review_params(valid_review_params()) == []

    @pytest.mark.parametrize('receipt_date', [None, '', '07/10/2019', '2019-02-30'])
    def test_receipt_date_not_a_date(self, receipt_date):
        problems = check_review_params(valid_review_params(receipt_date=receipt_date))
        assert len(problems) == 1
        assert 'receipt_date is not a date string' in problems[0]

    def test_receipt_date_in_future(self):
        tomorrow = (timezone.localdate() + timedelta(days=1)).isoformat()
        problems = check_review_params(valid_review_params(receipt_date=tomorrow))
        assert 'in the future' in problems[0]

    def test_receipt_date_before_ama(self):
        problems = check_review_params(valid_review_params(receipt_date='2019-02-18'))
        assert 'before the AMA activation date' in problems[0]

    @override_settings(AMA_ACTIVATION_DATE='2018-01-01')
    def test_ama_activation_date_from_settings(self):
        assert check_review_params(valid_review_params(receipt_date='2018-06-01')) == []

    @pytest.mark.parametrize('benefit_type', [None, '', '  '])
    def test_benefit_type_blank(self, benefit_type):
        assert check_review_params(valid_review_params(benefit_type=benefit_type)) == ['benefit_type is blank']

    def test_benefit_type_unknown(self):
        problems = check_review_params(valid_review_params(benefit_type='snacks'))
        assert problems == ['benefit_type is not a benefit type (line of business): <snacks>']

    def test_invalid_payee_code(self):
        problems = check_review_params(valid_review_params(payee_code='35'))
        assert len(problems) == 1
        assert '35' in problems[0]

    def test_non_boolean_flags(self):
        problems = check_review_params(valid_review_params(informal_conference='yes', same_office=1))
        assert problems == [
            'informal_conference is not a boolean: <yes>',
            'same_office is not a boolean: <1>',
        ]

    def test_reports_every_problem(self):
        problems = check_review_params(valid_review_params(receipt_date=None, benefit_type=None, payee_code='99x'))
        assert len(problems) == 3

    def test_claimant_id_longer_than_column(self):
        params = valid_review_params(claimant='x' * 80, veteran_is_not_claimant=True)
        assert check_review_params(params) == [
            f"claimant participant_id is longer than 20 characters: <{'x' * 80}>",
        ]

    def test_claimant_id_at_column_width(self):
        params = valid_review_params(claimant='4' * 20, payee_code='10', veteran_is_not_claimant=True)
        assert check_review_params(params) == []


@pytest.mark.django_db
class TestReviewIntake:

    def _started(self):
        veteran = VeteranFactory(file_number='64205050', participant_id='600000001')
        intake = IntakeFactory(veteran_file_number='64205050', started_at=timezone.now())
        return intake, veteran

    def test_creates_review_with_veteran_as_claimant(self):
        intake, veteran = self._started()

        review = review_intake(intake, veteran, valid_review_params())

        assert review.receipt_date == date(2019, 7, 10)
        assert review.benefit_type == 'pension'
        assert review.informal_conference is True
        assert review.veteran_is_not_claimant is False
        claimant = review.claimants.get()
        assert claimant.participant_id == '600000001'
        assert claimant.payee_code is None
        intake.refresh_from_db()
        assert intake.detail == review

    def test_creates_review_with_other_claimant(self):
        intake, veteran = self._started()
        params = valid_review_params(claimant='44', payee_code='10', veteran_is_not_claimant=True)

        review = review_intake(intake, veteran, params)

        claimant = review.claimants.get()
        assert claimant.participant_id == '44'
        assert claimant.payee_code == '10'

    def test_invalid_params_raise_review_error(self):
        intake, veteran = self._started()

        with pytest.raises(ReviewError) as exc_info:
            review_intake(intake, veteran, valid_review_params(benefit_type=None))

        assert exc_info.value.code == 'intake_review_failed'
        assert exc_info.value.http_status == 422
        assert exc_info.value.detail == {'errors': ['benefit_type is blank']}
        assert HigherLevelReview.objects.count() == 0


@pytest.mark.django_db
class TestCompleteIntake:

    def _reviewed(self):
        review = HigherLevelReviewFactory(benefit_type='pension')
        intake = IntakeFactory(veteran_file_number=review.veteran_file_number, started_at=timezone.now(), detail=review)
        return intake, review

    def test_creates_request_issues_in_order(self):
        intake, review = self._reviewed()
        issues = [
            {'is_unidentified': False, 'benefit_type': 'pension', 'rating_issue_reference_id': 616, 'notes': 'A'},
            {'is_unidentified': True, 'benefit_type': 'pension', 'notes': None,
             'decision_date': '2019-05-09', 'decision_text': 'B'},
        ]

        complete_intake(intake, {'request_issues': issues})

        saved = list(review.request_issues.all())
        assert [issue.position for issue in saved] == [0, 1]
        assert saved[0].rating_issue_reference_id == '616'
        assert saved[0].notes == 'A'
        assert saved[1].is_unidentified is True
        assert saved[1].decision_date == date(2019, 5, 9)
        assert saved[1].notes is None

        intake.refresh_from_db()
        review.refresh_from_db()
        assert intake.completion_status == 'success'
        assert intake.completed_at is not None
        assert review.establishment_submitted_at is not None

    def test_bad_decision_date_raises_complete_error(self):
        intake, review = self._reviewed()
        issues = [{'is_unidentified': True, 'benefit_type': 'pension', 'notes': 'n', 'decision_date': '10/10/2020'}]

        with pytest.raises(CompleteError) as exc_info:
            complete_intake(intake, {'request_issues': issues})

        assert exc_info.value.code == 'intake_complete_failed'
        assert '10/10/2020' in exc_info.value.message
        assert RequestIssue.objects.count() == 0

    @pytest.mark.parametrize('id_field', ['contested_decision_issue_id', 'rating_issue_reference_id', 'vacols_id'])
    def test_id_longer_than_column_raises_complete_error(self, id_field):
        intake, review = self._reviewed()
        issues = [
            {'is_unidentified': False, 'benefit_type': 'pension', 'rating_issue_reference_id': '616', 'notes': 'A'},
            {'is_unidentified': False, 'benefit_type': 'pension', id_field: 'x' * 80, 'notes': 'B'},
        ]

        with pytest.raises(CompleteError) as exc_info:
            complete_intake(intake, {'request_issues': issues})

        assert exc_info.value.code == 'intake_complete_failed'
        assert exc_info.value.detail == {
            'errors': [f"request_issues[1].{id_field} is longer than 50 characters: <{'x' * 80}>"],
        }
        assert RequestIssue.objects.count() == 0

    def test_id_at_column_width_is_stored(self):
        intake, review = self._reviewed()
        issues = [{'is_unidentified': False, 'benefit_type': 'pension', 'vacols_id': 'x' * 50, 'notes': 'n'}]

        complete_intake(intake, {'request_issues': issues})

        assert review.request_issues.get().vacols_id == 'x' * 50


@pytest.mark.django_db
class TestStartReviewComplete:

    def test_full_workflow(self):
        VeteranFactory(file_number='64205050')
        processor = HigherLevelReviewProcessor(build_payload([PENSION_OTHER_ISSUE]))

        review = start_review_complete(processor)

        assert review.request_issues.count() == 1
        assert review.request_issues.get().nonrating_issue_category == 'Penalty Period'
        assert Intake.objects.get().completion_status == 'success'

    def test_processor_errors_raise_before_touching_db(self):
        VeteranFactory(file_number='64205050')
        processor = HigherLevelReviewProcessor(build_payload([{'contests': 'the spherical nature of our planet'}]))

        with pytest.raises(IntakeApiError) as exc_info:
            start_review_complete(processor)

        assert exc_info.value.code == 'unknown_contestation_type'
        assert Intake.objects.count() == 0

    def test_complete_failure_rolls_back(self):
        VeteranFactory(file_number='64205050')
        issue = dict(PENSION_OTHER_ISSUE, decision_date='not a date')
        processor = HigherLevelReviewProcessor(build_payload([issue]))

        with pytest.raises(CompleteError):
            start_review_complete(processor)

        assert Intake.objects.count() == 0
        assert HigherLevelReview.objects.count() == 0
        assert Claimant.objects.count() == 0


@pytest.mark.django_db
class TestGetHigherLevelReview:

    def test_existing_review(self):
        review = HigherLevelReviewFactory()
        RequestIssueFactory(decision_review=review)

        result = get_higher_level_review(review.id)
        assert result.id == review.id
        assert result.request_issues.count() == 1

    def test_nonexistent_review_raises(self):
        fake_id = uuid.uuid4()
        with pytest.raises(BlockError) as exc_info:
            get_higher_level_review(fake_id)

        assert exc_info.value.code == 'HIGHER_LEVEL_REVIEW_NOT_FOUND'
        assert exc_info.value.http_status == 404
