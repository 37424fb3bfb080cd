import uuid
from django.db import models


class Veteran(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    file_number = models.CharField(max_length=20, unique=True)
    participant_id = models.CharField(max_length=20, blank=True, null=True)
    first_name = models.CharField(max_length=100, blank=True, default='')
    last_name = models.CharField(max_length=100, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'veterans'


class HigherLevelReview(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    veteran_file_number = models.CharField(max_length=20, db_index=True)
    receipt_date = models.DateField()
    benefit_type = models.CharField(max_length=20)
    informal_conference = models.BooleanField(default=False)
    same_office = models.BooleanField(default=False)
    legacy_opt_in_approved = models.BooleanField(default=False)
    veteran_is_not_claimant = models.BooleanField(default=False)
    establishment_submitted_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'higher_level_reviews'


class Claimant(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    decision_review = models.ForeignKey(
        HigherLevelReview, on_delete=models.CASCADE, related_name='claimants'
    )
    participant_id = models.CharField(max_length=20, blank=True, null=True)
    payee_code = models.CharField(max_length=2, blank=True, null=True)

    class Meta:
        db_table = 'claimants'


class RequestIssue(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    decision_review = models.ForeignKey(
        HigherLevelReview, on_delete=models.CASCADE, related_name='request_issues'
    )
    benefit_type = models.CharField(max_length=20)
    is_unidentified = models.BooleanField(default=False)
    contested_decision_issue_id = models.CharField(max_length=50, blank=True, null=True)
    rating_issue_reference_id = models.CharField(max_length=50, blank=True, null=True)
    vacols_id = models.CharField(max_length=50, blank=True, null=True)
    nonrating_issue_category = models.CharField(max_length=200, blank=True, null=True)
    decision_date = models.DateField(blank=True, null=True)
    decision_text = models.TextField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    position = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'request_issues'
        ordering = ['position']


class Intake(models.Model):
    FORM_TYPE_CHOICES = [
        ('higher_level_review', 'Higher Level Review'),
    ]
    COMPLETION_STATUS_CHOICES = [
        ('success', 'Success'),
        ('error', 'Error'),
        ('canceled', 'Canceled'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    veteran_file_number = models.CharField(max_length=20, db_index=True)
    form_type = models.CharField(max_length=30, choices=FORM_TYPE_CHOICES, default='higher_level_review')
    detail = models.OneToOneField(
        HigherLevelReview, on_delete=models.SET_NULL, blank=True, null=True, related_name='intake'
    )
    started_at = models.DateTimeField(blank=True, null=True)
    completion_started_at = models.DateTimeField(blank=True, null=True)
    completed_at = models.DateTimeField(blank=True, null=True)
    completion_status = models.CharField(
        max_length=20, choices=COMPLETION_STATUS_CHOICES, blank=True, null=True
    )
    error_code = models.CharField(max_length=50, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'intakes'
