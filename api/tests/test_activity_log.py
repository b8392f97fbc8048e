"""Tests for best-effort activity logging."""

from sqlalchemy.exc import OperationalError

from asset_registry.models.activity_log import ActivityLog
from asset_registry.services.activity_log import list_recent_activity, record_activity


class FailingCommitSession:
    """Session stand-in whose commits fail."""

    def __init__(self):
        self.added = []
        self.rolled_back = False

    def add(self, obj):
        self.added.append(obj)

    def commit(self):
        raise OperationalError("INSERT INTO activity_logs", {}, Exception("disk full"))

    def rollback(self):
        self.rolled_back = True


def test_record_activity(test_db):
    assert record_activity(test_db, "Ana", "Exported assets") is True
    entry = test_db.query(ActivityLog).one()
    assert entry.user_name == "Ana"
    assert entry.created_at is not None


def test_failed_write_is_swallowed():
    db = FailingCommitSession()
    assert record_activity(db, "Ana", "Deleted asset 3") is False
    assert db.rolled_back


def test_list_recent_activity_limit(test_db):
    for i in range(5):
        record_activity(test_db, "Ana", f"action {i}")
    entries = list_recent_activity(test_db, limit=3)
    assert [e.action for e in entries] == ["action 4", "action 3", "action 2"]
