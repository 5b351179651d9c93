"""
Submission Store

CRUD access to the submissions table.

Storage failures never reach the caller: they are logged and the operation
degrades to an empty result or a zero count.
"""

from django.db import transaction
import logging
from typing import Any, Dict, Iterable, List, Optional

from touch.models import Submission

logger = logging.getLogger(__name__)


# Column order of a stored submission
SUBMISSION_COLUMNS = (
    'id',
    'name',
    'mail',
    'subject_id',
    'subject_name',
    'message',
    'newsletter',
    'language',
    'timestamp',
    'ip_address',
    'ip_address_proxy',
    'user_agent',
)


class SubmissionStore:
    """Reads and writes submission rows as plain dicts."""

    def __init__(self, model=Submission):
        self.model = model

    def select(self, ids: Optional[Iterable[int]] = None) -> List[Dict[str, Any]]:
        """
        Get submissions.

        Args:
            ids: Optional submission ids. All submissions are returned when
                omitted or empty.

        Returns:
            List of submission dicts (empty on error or no match)
        """
        try:
            queryset = self.model.objects.all()

            if ids:
                queryset = queryset.filter(id__in=list(ids))

            return list(queryset.order_by('id').values(*SUBMISSION_COLUMNS))

        except Exception as exc:
            logger.error(f"Failed to select submissions: {exc}")

        return []

    def insert(self, submissions: List[Dict[str, Any]]) -> int:
        """
        Insert one or more submissions.

        The batch is written in a single transaction, so a failing row
        discards the whole batch.

        Returns:
            Id of the last inserted submission, or 0 if nothing was inserted
        """
        last_id = 0

        try:
            with transaction.atomic():
                for submission in submissions:
                    row = self.model.objects.create(**submission)
                    last_id = row.id

            return last_id

        except Exception as exc:
            logger.error(f"Failed to insert submissions: {exc}")

        return 0

    def update(self, submissions: List[Dict[str, Any]]) -> int:
        """
        Update submissions matched by their "id" key.

        Rows are updated one by one; a failure stops the batch but keeps the
        rows already updated.

        Returns:
            Number of updated rows
        """
        updated = 0

        try:
            for submission in submissions:
                fields = {key: value for key, value in submission.items() if key != 'id'}

                with transaction.atomic():
                    updated += self.model.objects.filter(id=submission['id']).update(**fields)

        except Exception as exc:
            logger.error(f"Failed to update submissions after {updated} row(s): {exc}")

        return updated

    def delete(self, ids: Iterable[int]) -> int:
        """
        Delete submissions by id.

        Returns:
            Number of deleted rows, or 0 on error
        """
        try:
            deleted, _ = self.model.objects.filter(id__in=list(ids)).delete()
            return deleted

        except Exception as exc:
            logger.error(f"Failed to delete submissions: {exc}")

        return 0
