"""
Unit tests for the venue search filter, compiled for PostgreSQL without a database
"""

import pytest
from sqlalchemy.dialects import postgresql

from src.service.marketplace.driven_adapter.repo.venue_query_repo_impl import (
    venue_search_clause,
)


@pytest.mark.unit
class TestVenueSearchClause:
    def test_wildcards_in_search_match_literally(self) -> None:
        compiled = venue_search_clause('  100%_off ').compile(dialect=postgresql.dialect())

        assert "ESCAPE '/'" in str(compiled)
        assert set(compiled.params.values()) == {'100/%/_off'}

    def test_search_covers_name_and_address(self) -> None:
        sql = str(venue_search_clause('blue').compile(dialect=postgresql.dialect()))

        assert 'venue.name' in sql
        assert 'venue.address' in sql
        assert ' OR ' in sql
