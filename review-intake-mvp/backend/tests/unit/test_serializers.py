"""
Unit tests for serializer functions.

覆盖 serialize_higher_level_review 的 JSON:API 结构 + serialize_request_issue。
"""
import pytest
from datetime import date

from decision_reviews.serializers import serialize_higher_level_review, serialize_request_issue
from tests.conftest import ClaimantFactory, HigherLevelReviewFactory, RequestIssueFactory


@pytest.mark.django_db
class TestSerializeRequestIssue:

    def test_all_fields(self):
        issue = RequestIssueFactory(
            rating_issue_reference_id='616',
            nonrating_issue_category=None,
            decision_date=date(2019, 5, 9),
        )
        result = serialize_request_issue(issue)

        assert result['id'] == str(issue.id)
        assert result['rating_issue_reference_id'] == '616'
        assert result['nonrating_issue_category'] is None
        assert result['decision_date'] == '2019-05-09'
        assert result['is_unidentified'] is False

    def test_missing_decision_date(self):
        result = serialize_request_issue(RequestIssueFactory(decision_date=None))
        assert result['decision_date'] is None


@pytest.mark.django_db
class TestSerializeHigherLevelReview:

    def test_attributes(self):
        review = HigherLevelReviewFactory(benefit_type='pension', informal_conference=True)
        result = serialize_higher_level_review(review)

        data = result['data']
        assert data['type'] == 'HigherLevelReview'
        assert data['id'] == str(review.id)
        assert data['attributes']['receiptDate'] == '2019-07-10'
        assert data['attributes']['benefitType'] == 'pension'
        assert data['attributes']['informalConference'] is True
        assert data['attributes']['establishmentSubmittedAt'] is None

    def test_relationships_and_included(self):
        review = HigherLevelReviewFactory(veteran_file_number='64205050')
        ClaimantFactory(decision_review=review, participant_id='44', payee_code='10')
        first = RequestIssueFactory(decision_review=review, position=0)
        second = RequestIssueFactory(decision_review=review, position=1)

        result = serialize_higher_level_review(review)
        relationships = result['data']['relationships']

        assert relationships['veteran']['data']['id'] == '64205050'
        assert relationships['claimant']['data']['id'] == '44'
        assert relationships['claimant']['data']['meta']['payeeCode'] == '10'
        assert [ref['id'] for ref in relationships['requestIssues']['data']] == [str(first.id), str(second.id)]
        assert [item['id'] for item in result['included']] == [str(first.id), str(second.id)]
        assert all(item['type'] == 'RequestIssue' for item in result['included'])

    def test_no_claimant_no_issues(self):
        result = serialize_higher_level_review(HigherLevelReviewFactory())

        assert result['data']['relationships']['claimant']['data']['id'] is None
        assert result['data']['relationships']['requestIssues']['data'] == []
        assert result['included'] == []
