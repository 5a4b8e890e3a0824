"""
Management command to recompute region quota counters from enrollment records.
"""

import logging
from uuid import UUID

from django.core.management.base import BaseCommand, CommandError

from enrollment_manager.apps.courses.models import Course
from enrollment_manager.apps.enrollments.api import reconcile_quota_counts

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """
    Recompute ``current_count`` and ``waitlist_count`` of region quotas from the
    CONFIRMED and WAITLIST enrollments assigned to them, and fix any that drifted.
    """
    help = (
        'Recompute region quota counters from enrollment records and write back any drifted values'
    )

    def add_arguments(self, parser):
        """
        Entry point to add arguments.
        """
        parser.add_argument(
            '--course',
            action='store',
            dest='course_uuid',
            default=None,
            help='Only reconcile the region quotas of the course with this UUID.',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            dest='dry_run',
            default=False,
            help='Dry Run, log drifted counters without writing them.',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']
        course = None

        if options['course_uuid']:
            try:
                course_uuid = UUID(options['course_uuid'])
            except ValueError as exc:
                raise CommandError(f'{options["course_uuid"]} is not a valid course UUID.') from exc
            course = Course.objects.filter(uuid=course_uuid).first()
            if not course:
                raise CommandError(f'Course {course_uuid} does not exist.')

        logger.info(
            '[RECONCILE_REGION_QUOTA_COUNTS] Starting. Course: [%s], dry_run [%s]',
            course.uuid if course else 'all',
            dry_run,
        )

        drifts = reconcile_quota_counts(course=course, commit=not dry_run)

        for drift in drifts:
            logger.info(
                '[RECONCILE_REGION_QUOTA_COUNTS] %s quota [%s]: current_count %s -> %s, waitlist_count %s -> %s',
                'Would fix' if dry_run else 'Fixed',
                drift.quota.uuid,
                drift.quota.current_count,
                drift.expected_confirmed,
                drift.quota.waitlist_count,
                drift.expected_waitlist,
            )

        logger.info(
            '[RECONCILE_REGION_QUOTA_COUNTS] Done. %s drifted quota(s), dry_run [%s]',
            len(drifts),
            dry_run,
        )
