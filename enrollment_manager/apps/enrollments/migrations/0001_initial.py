import uuid

import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
import simple_history.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('courses', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Enrollment',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True)),
                ('status', models.CharField(choices=[('PENDING_REGION', 'Pending region'), ('CONFIRMED', 'Confirmed'), ('WAITLIST', 'Waitlist'), ('REJECTED', 'Rejected')], db_index=True, default='PENDING_REGION', max_length=32)),
                ('waitlist_position', models.PositiveIntegerField(blank=True, help_text="1-based rank among the course's waitlisted enrollments, by creation time.", null=True)),
                ('eligibility_reason', models.TextField(blank=True, help_text='Explanation of the current status, shown to the enrollee.', null=True)),
                ('state', models.CharField(blank=True, help_text="The enrollee's declared two-letter state (UF) code.", max_length=2, null=True)),
                ('city', models.CharField(blank=True, help_text="The enrollee's declared city.", max_length=255, null=True)),
                ('course', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='enrollments', to='courses.course')),
                ('region_quota', models.ForeignKey(blank=True, help_text='The region bucket this enrollment currently counts against, if any.', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='enrollments', to='courses.courseregionquota')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='enrollments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created'],
            },
        ),
        migrations.CreateModel(
            name='HistoricalEnrollment',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('uuid', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False)),
                ('status', models.CharField(choices=[('PENDING_REGION', 'Pending region'), ('CONFIRMED', 'Confirmed'), ('WAITLIST', 'Waitlist'), ('REJECTED', 'Rejected')], db_index=True, default='PENDING_REGION', max_length=32)),
                ('waitlist_position', models.PositiveIntegerField(blank=True, help_text="1-based rank among the course's waitlisted enrollments, by creation time.", null=True)),
                ('eligibility_reason', models.TextField(blank=True, help_text='Explanation of the current status, shown to the enrollee.', null=True)),
                ('state', models.CharField(blank=True, help_text="The enrollee's declared two-letter state (UF) code.", max_length=2, null=True)),
                ('city', models.CharField(blank=True, help_text="The enrollee's declared city.", max_length=255, null=True)),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField()),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('course', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='courses.course')),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('region_quota', models.ForeignKey(blank=True, db_constraint=False, help_text='The region bucket this enrollment currently counts against, if any.', null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='courses.courseregionquota')),
                ('user', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'historical enrollment',
                'verbose_name_plural': 'historical enrollments',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.AddIndex(
            model_name='enrollment',
            index=models.Index(fields=['course', 'status'], name='enrollments_course__0b4f57_idx'),
        ),
        migrations.AddIndex(
            model_name='enrollment',
            index=models.Index(fields=['region_quota', 'status'], name='enrollments_region__4f2a1c_idx'),
        ),
        migrations.AddConstraint(
            model_name='enrollment',
            constraint=models.UniqueConstraint(fields=('user', 'course'), name='enrollments_unique_user_course'),
        ),
    ]
