import uuid

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
import simple_history.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Course',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True)),
                ('title', models.CharField(max_length=255)),
                ('max_enrollments', models.PositiveIntegerField(blank=True, help_text='Course-wide cap on confirmed enrollments. Leave empty for no cap.', null=True)),
                ('waitlist_enabled', models.BooleanField(default=False, help_text="Whether enrollments may be placed on this course's waitlist.")),
                ('waitlist_limit', models.PositiveIntegerField(default=0, help_text='Course-wide cap on waitlisted enrollments. 0 means unlimited.')),
                ('region_restriction_enabled', models.BooleanField(default=False, help_text='Whether confirmed enrollments are governed by region quotas.')),
                ('allow_all_regions', models.BooleanField(default=True, help_text='If false and region restriction is enabled, enrollments without a matching region quota cannot be confirmed.')),
            ],
            options={
                'ordering': ['title'],
            },
        ),
        migrations.CreateModel(
            name='HistoricalCourse',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('uuid', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False)),
                ('title', models.CharField(max_length=255)),
                ('max_enrollments', models.PositiveIntegerField(blank=True, help_text='Course-wide cap on confirmed enrollments. Leave empty for no cap.', null=True)),
                ('waitlist_enabled', models.BooleanField(default=False, help_text="Whether enrollments may be placed on this course's waitlist.")),
                ('waitlist_limit', models.PositiveIntegerField(default=0, help_text='Course-wide cap on waitlisted enrollments. 0 means unlimited.')),
                ('region_restriction_enabled', models.BooleanField(default=False, help_text='Whether confirmed enrollments are governed by region quotas.')),
                ('allow_all_regions', models.BooleanField(default=True, help_text='If false and region restriction is enabled, enrollments without a matching region quota cannot be confirmed.')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField()),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'historical course',
                'verbose_name_plural': 'historical courses',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='CourseRegionQuota',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True)),
                ('state', models.CharField(help_text='Two-letter state (UF) code.', max_length=2)),
                ('city', models.CharField(blank=True, help_text='Leave empty for a quota covering the whole state.', max_length=255, null=True)),
                ('limit', models.PositiveIntegerField(help_text='Cap on confirmed enrollments in this region.')),
                ('waitlist_limit', models.PositiveIntegerField(default=0, help_text='Cap on waitlisted enrollments in this region. 0 means unlimited.')),
                ('current_count', models.IntegerField(default=0, help_text='Live count of confirmed enrollments in this region.', validators=[django.core.validators.MinValueValidator(0)])),
                ('waitlist_count', models.IntegerField(default=0, help_text='Live count of waitlisted enrollments in this region.', validators=[django.core.validators.MinValueValidator(0)])),
                ('course', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='region_quotas', to='courses.course')),
            ],
            options={
                'ordering': ['created'],
                'indexes': [models.Index(fields=['course', 'state'], name='courses_quota_course_state_idx')],
            },
        ),
    ]
