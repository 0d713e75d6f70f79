import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

import hiretrack.core.validators

APPLICATION_STATUSES = [
    ('applied', 'Applied'), ('screening', 'Screening'),
    ('phone_interview', 'Phone Interview'),
    ('technical_interview', 'Technical Interview'),
    ('final_interview', 'Final Interview'), ('offer', 'Offer'),
    ('accepted', 'Accepted'), ('rejected', 'Rejected'),
    ('withdrawn', 'Withdrawn'),
]
APPLICATION_SOURCES = [
    ('website', 'Website'), ('linkedin', 'LinkedIn'), ('indeed', 'Indeed'),
    ('glassdoor', 'Glassdoor'), ('referral', 'Referral'),
    ('recruiter', 'Recruiter'), ('career_fair', 'Career Fair'),
    ('university', 'University'), ('direct', 'Direct'), ('other', 'Other'),
]
INTERVIEW_TYPES = [
    ('phone', 'Phone Interview'), ('video', 'Video Interview'),
    ('onsite', 'On-site Interview'), ('technical', 'Technical Interview'),
    ('behavioral', 'Behavioral Interview'), ('panel', 'Panel Interview'),
]
INTERVIEW_STATUSES = [
    ('scheduled', 'Scheduled'), ('confirmed', 'Confirmed'),
    ('completed', 'Completed'), ('cancelled', 'Cancelled'),
    ('no_show', 'No Show'),
]
DECISIONS = [
    ('strong_yes', 'Strong Yes'), ('yes', 'Yes'), ('maybe', 'Maybe'),
    ('no', 'No'), ('strong_no', 'Strong No'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('organization', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Job',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=100, validators=[django.core.validators.MinLengthValidator(3)])),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('published', 'Published'), ('closed', 'Closed')], db_index=True, default='draft', max_length=20)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='jobs', to='organization.company')),
            ],
            options={
                'ordering': ('-created_at', '-modified_at'),
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Candidate',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('first_name', models.CharField(max_length=150)),
                ('last_name', models.CharField(blank=True, max_length=150)),
                ('email', models.EmailField(max_length=255)),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='candidates', to='organization.company')),
            ],
            options={
                'ordering': ('-created_at', '-modified_at'),
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Application',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('status', models.CharField(choices=APPLICATION_STATUSES, db_index=True, default='applied', max_length=50)),
                ('source', models.CharField(blank=True, choices=APPLICATION_SOURCES, max_length=100)),
                ('cover_letter', models.TextField(blank=True, max_length=5000, validators=[django.core.validators.MaxLengthValidator(5000)])),
                ('notes', models.TextField(blank=True, max_length=2000, validators=[django.core.validators.MaxLengthValidator(2000)])),
                ('rejection_reason', models.CharField(blank=True, max_length=255)),
                ('applied_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('stage_changed_at', models.DateTimeField(blank=True, null=True)),
                ('rejected_at', models.DateTimeField(blank=True, null=True)),
                ('salary_offered', models.BigIntegerField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(0, message='must be a positive amount')])),
                ('rating', models.PositiveSmallIntegerField(blank=True, null=True, validators=[hiretrack.core.validators.MinMaxValueValidator(1, 5, message='must be between 1 and 5')])),
                ('candidate', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='applications', to='recruitment.candidate')),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='applications', to='organization.company')),
                ('job', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='applications', to='recruitment.job')),
                ('stage_changed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='changed_application_stages', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('-applied_at',),
                'constraints': [
                    models.UniqueConstraint(fields=('candidate', 'job'), name='unique_application_per_candidate_job'),
                    models.CheckConstraint(condition=models.Q(('status__in', [status for status, _ in APPLICATION_STATUSES])), name='application_status_valid'),
                    models.CheckConstraint(condition=models.Q(models.Q(('rejected_at__isnull', False), ('status', 'rejected')), models.Q(models.Q(('status', 'rejected'), _negated=True), ('rejected_at__isnull', True)), _connector='OR'), name='application_rejected_at_consistency'),
                    models.CheckConstraint(condition=models.Q(('rating__isnull', True), models.Q(('rating__gte', 1), ('rating__lte', 5)), _connector='OR'), name='application_rating_range'),
                    models.CheckConstraint(condition=models.Q(('salary_offered__isnull', True), ('salary_offered__gte', 0), _connector='OR'), name='application_salary_offered_positive'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Interview',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('interview_type', models.CharField(choices=INTERVIEW_TYPES, db_index=True, max_length=20)),
                ('status', models.CharField(choices=INTERVIEW_STATUSES, db_index=True, default='scheduled', max_length=20)),
                ('scheduled_at', models.DateTimeField(db_index=True)),
                ('duration_minutes', models.PositiveSmallIntegerField(validators=[hiretrack.core.validators.MinMaxValueValidator(1, 480, message='must be between 1 and 480 minutes')])),
                ('location', models.CharField(blank=True, max_length=255)),
                ('video_link', models.CharField(blank=True, max_length=500, validators=[django.core.validators.URLValidator(message='must be a valid URL', schemes=['http', 'https'])])),
                ('calendar_event_id', models.CharField(blank=True, max_length=100)),
                ('feedback', models.TextField(blank=True, max_length=2000, validators=[django.core.validators.MaxLengthValidator(2000)])),
                ('notes', models.TextField(blank=True, max_length=1000, validators=[django.core.validators.MaxLengthValidator(1000)])),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('decision', models.CharField(blank=True, choices=DECISIONS, max_length=20)),
                ('rating', models.PositiveSmallIntegerField(blank=True, null=True, validators=[hiretrack.core.validators.MinMaxValueValidator(1, 5, message='must be between 1 and 5')])),
                ('application', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='interviews', to='recruitment.application')),
                ('interviewer', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='conducted_interviews', to=settings.AUTH_USER_MODEL)),
                ('scheduled_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='scheduled_interviews', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('scheduled_at',),
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('interview_type__in', [interview_type for interview_type, _ in INTERVIEW_TYPES])), name='interview_type_valid'),
                    models.CheckConstraint(condition=models.Q(('status__in', [status for status, _ in INTERVIEW_STATUSES])), name='interview_status_valid'),
                    models.CheckConstraint(condition=models.Q(('decision', ''), ('decision__in', [decision for decision, _ in DECISIONS]), _connector='OR'), name='interview_decision_valid'),
                    models.CheckConstraint(condition=models.Q(models.Q(('completed_at__isnull', False), ('status', 'completed')), models.Q(models.Q(('status', 'completed'), _negated=True), ('completed_at__isnull', True)), _connector='OR'), name='interview_completed_at_consistency'),
                    models.CheckConstraint(condition=models.Q(('decision', ''), ('status', 'completed'), _connector='OR'), name='interview_decision_requires_completion'),
                    models.CheckConstraint(condition=models.Q(('rating__isnull', True), models.Q(('rating__gte', 1), ('rating__lte', 5)), _connector='OR'), name='interview_rating_range'),
                    models.CheckConstraint(condition=models.Q(('duration_minutes__gte', 1), ('duration_minutes__lte', 480)), name='interview_duration_range'),
                ],
            },
        ),
    ]
