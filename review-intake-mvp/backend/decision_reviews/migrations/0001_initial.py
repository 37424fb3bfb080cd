import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Veteran',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('file_number', models.CharField(max_length=20, unique=True)),
                ('participant_id', models.CharField(blank=True, max_length=20, null=True)),
                ('first_name', models.CharField(blank=True, default='', max_length=100)),
                ('last_name', models.CharField(blank=True, default='', max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'veterans',
            },
        ),
        migrations.CreateModel(
            name='HigherLevelReview',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('veteran_file_number', models.CharField(db_index=True, max_length=20)),
                ('receipt_date', models.DateField()),
                ('benefit_type', models.CharField(max_length=20)),
                ('informal_conference', models.BooleanField(default=False)),
                ('same_office', models.BooleanField(default=False)),
                ('legacy_opt_in_approved', models.BooleanField(default=False)),
                ('veteran_is_not_claimant', models.BooleanField(default=False)),
                ('establishment_submitted_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'higher_level_reviews',
            },
        ),
        migrations.CreateModel(
            name='Claimant',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('participant_id', models.CharField(blank=True, max_length=20, null=True)),
                ('payee_code', models.CharField(blank=True, max_length=2, null=True)),
                ('decision_review', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='claimants',
                    to='decision_reviews.higherlevelreview',
                )),
            ],
            options={
                'db_table': 'claimants',
            },
        ),
        migrations.CreateModel(
            name='RequestIssue',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('benefit_type', models.CharField(max_length=20)),
                ('is_unidentified', models.BooleanField(default=False)),
                ('contested_decision_issue_id', models.CharField(blank=True, max_length=50, null=True)),
                ('rating_issue_reference_id', models.CharField(blank=True, max_length=50, null=True)),
                ('vacols_id', models.CharField(blank=True, max_length=50, null=True)),
                ('nonrating_issue_category', models.CharField(blank=True, max_length=200, null=True)),
                ('decision_date', models.DateField(blank=True, null=True)),
                ('decision_text', models.TextField(blank=True, null=True)),
                ('notes', models.TextField(blank=True, null=True)),
                ('position', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('decision_review', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='request_issues',
                    to='decision_reviews.higherlevelreview',
                )),
            ],
            options={
                'db_table': 'request_issues',
                'ordering': ['position'],
            },
        ),
        migrations.CreateModel(
            name='Intake',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('veteran_file_number', models.CharField(db_index=True, max_length=20)),
                ('form_type', models.CharField(
                    choices=[('higher_level_review', 'Higher Level Review')],
                    default='higher_level_review',
                    max_length=30,
                )),
                ('started_at', models.DateTimeField(blank=True, null=True)),
                ('completion_started_at', models.DateTimeField(blank=True, null=True)),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('completion_status', models.CharField(
                    blank=True,
                    choices=[('success', 'Success'), ('error', 'Error'), ('canceled', 'Canceled')],
                    max_length=20,
                    null=True,
                )),
                ('error_code', models.CharField(blank=True, max_length=50, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('detail', models.OneToOneField(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='intake',
                    to='decision_reviews.higherlevelreview',
                )),
            ],
            options={
                'db_table': 'intakes',
            },
        ),
    ]
