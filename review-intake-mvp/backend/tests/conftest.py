"""
Shared fixtures for all tests.

factory-boy factories live here so both unit/ and integration/ can import them.
"""
import copy
import pytest
from datetime import date
from django.test import Client

import factory
from decision_reviews.models import Veteran, HigherLevelReview, Claimant, RequestIssue, Intake


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

class VeteranFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Veteran

    file_number = factory.Sequence(lambda n: f'{64205050 + n}')
    participant_id = factory.Sequence(lambda n: f'{600000000 + n}')
    first_name = 'Ed'
    last_name = 'Merica'


class HigherLevelReviewFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = HigherLevelReview

    veteran_file_number = factory.Sequence(lambda n: f'{64205050 + n}')
    receipt_date = date(2019, 7, 10)
    benefit_type = 'compensation'


class ClaimantFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Claimant

    decision_review = factory.SubFactory(HigherLevelReviewFactory)
    participant_id = '44'
    payee_code = '10'


class RequestIssueFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = RequestIssue

    decision_review = factory.SubFactory(HigherLevelReviewFactory)
    benefit_type = 'compensation'
    nonrating_issue_category = 'Apportionment'
    notes = 'Some notes.'


class IntakeFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Intake

    veteran_file_number = factory.Sequence(lambda n: f'{64205050 + n}')
    form_type = 'higher_level_review'


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------

BASE_ATTRIBUTES = {
    'receiptDate': '2019-07-10',
    'informalConference': True,
    'sameOffice': False,
    'legacyOptInApproved': True,
    'benefitType': 'pension',
}

PENSION_OTHER_ISSUE = {
    'contests': 'other',
    'category': 'Penalty Period',
    'decision_date': '2020-10-10',
    'decision_text': 'Some text here.',
    'notes': 'not sure if this is on file',
}


def build_payload(issues, veteran_file_number='64205050', claimant=None, **attribute_overrides):
    """拼一个 V3 请求体。issues 是 RequestIssue 的 attributes 列表。"""
    attributes = dict(BASE_ATTRIBUTES, **attribute_overrides)
    relationships = {
        'veteran': {'data': {'type': 'Veteran', 'id': veteran_file_number}},
    }
    if claimant is not None:
        relationships['claimant'] = {'data': claimant}

    return {
        'data': {
            'type': 'HigherLevelReview',
            'attributes': attributes,
            'relationships': relationships,
        },
        'included': [
            {'type': 'RequestIssue', 'attributes': copy.deepcopy(issue)}
            for issue in issues
        ],
    }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def api_client():
    """Django test client for integration tests."""
    return Client()


@pytest.fixture
def sample_hlr_payload():
    """Minimal valid payload: one categorized "other" pension issue."""
    return build_payload([PENSION_OTHER_ISSUE])
