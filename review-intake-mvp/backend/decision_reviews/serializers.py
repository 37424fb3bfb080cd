"""
Response serializers: ORM 对象 → JSON-able dict。

只负责「输出格式化」，不做任何解析或校验。
输入解析和校验在 decision_reviews/intake/。
"""


def _iso(value):
    return value.isoformat() if value else None


def serialize_request_issue(issue):
    return {
        'id': str(issue.id),
        'benefit_type': issue.benefit_type,
        'is_unidentified': issue.is_unidentified,
        'contested_decision_issue_id': issue.contested_decision_issue_id,
        'rating_issue_reference_id': issue.rating_issue_reference_id,
        'vacols_id': issue.vacols_id,
        'nonrating_issue_category': issue.nonrating_issue_category,
        'decision_date': _iso(issue.decision_date),
        'decision_text': issue.decision_text,
        'notes': issue.notes,
    }


def serialize_higher_level_review(review):
    """Serialize review in the V3 JSON:API shape (data + included)."""
    claimant = review.claimants.first()
    request_issues = list(review.request_issues.all())

    return {
        'data': {
            'type': 'HigherLevelReview',
            'id': str(review.id),
            'attributes': {
                'receiptDate': _iso(review.receipt_date),
                'benefitType': review.benefit_type,
                'informalConference': review.informal_conference,
                'sameOffice': review.same_office,
                'legacyOptInApproved': review.legacy_opt_in_approved,
                'establishmentSubmittedAt': _iso(review.establishment_submitted_at),
                'createdAt': _iso(review.created_at),
            },
            'relationships': {
                'veteran': {
                    'data': {'type': 'Veteran', 'id': review.veteran_file_number},
                },
                'claimant': {
                    'data': {
                        'type': 'Claimant',
                        'id': claimant.participant_id if claimant else None,
                        'meta': {'payeeCode': claimant.payee_code if claimant else None},
                    },
                },
                'requestIssues': {
                    'data': [{'type': 'RequestIssue', 'id': str(issue.id)} for issue in request_issues],
                },
            },
        },
        'included': [
            {
                'type': 'RequestIssue',
                'id': str(issue.id),
                'attributes': serialize_request_issue(issue),
            }
            for issue in request_issues
        ],
    }
