"""
Unit tests for the status-guarded UPDATE statements, compiled for PostgreSQL

Bulk UPDATEs skip the unit of work, so the column-level onupdate for
updated_at must still be rendered into the SET clause.
"""

import pytest
from sqlalchemy import update
from sqlalchemy.dialects import postgresql

from src.service.marketplace.domain.entity.show_request_entity import ShowRequestStatus
from src.service.marketplace.domain.enum.event_status import EventStatus
from src.service.marketplace.driven_adapter.model.event_model import EventModel
from src.service.marketplace.driven_adapter.model.show_request_model import ShowRequestModel


def _sql(stmt: object) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))  # type: ignore[attr-defined]


@pytest.mark.unit
class TestConditionalUpdateSql:
    def test_show_request_decision_touches_updated_at(self) -> None:
        sql = _sql(
            update(ShowRequestModel)
            .where(
                ShowRequestModel.id == 1,
                ShowRequestModel.status == ShowRequestStatus.PENDING.value,
            )
            .values(status=ShowRequestStatus.ACCEPTED.value)
        )

        assert 'updated_at=now()' in sql

    def test_event_status_change_touches_updated_at(self) -> None:
        sql = _sql(
            update(EventModel)
            .where(EventModel.id == 1, EventModel.status == EventStatus.PUBLISHED.value)
            .values(status=EventStatus.CANCELED.value)
        )

        assert 'updated_at=now()' in sql
        assert 'event.status = ' in sql
