"""Property-based tests for service validation and aggregation using Hypothesis.

These tests verify properties that must hold for any input:
- blank detection agrees with str.strip()
- non-positive ids are always rejected, positive ids always accepted
- grouped permissions never repeat a name and keep first-seen order
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from repositories.permission_repository import PermissionRow
from schemas import CenterCreate
from services.base import is_blank, require_positive_id
from services.exceptions import ValidationError
from services.organization_service import center_service
from services.permission_service import get_permissions_grouped_by_user

# Mark all tests in this module as unit tests (no database required)
pytestmark = pytest.mark.unit

# Default settings for property tests - suppress slow health check
hypothesis_settings = settings(
    max_examples=100,
    suppress_health_check=[HealthCheck.too_slow],
)


# =============================================================================
# Custom Strategies
# =============================================================================


@st.composite
def permission_rows(draw, max_size: int = 40) -> list[PermissionRow]:
    """Rows as the repository returns them: ordered by rol then form."""
    rows = draw(
        st.lists(
            st.tuples(
                st.integers(min_value=1, max_value=3),
                st.integers(min_value=1, max_value=4),
                st.sampled_from(["read", "create", "update", "delete"]),
            ),
            max_size=max_size,
        )
    )
    rows.sort(key=lambda r: (r[0], r[1]))
    return [
        PermissionRow(rol_id, f"Rol {rol_id}", form_id, f"Form {form_id}", name)
        for rol_id, form_id, name in rows
    ]


def _grouped(rows: list[PermissionRow]):
    repository = MagicMock()
    repository.return_value.get_permission_rows_for_user = AsyncMock(
        return_value=rows
    )
    with patch("services.permission_service.RolFormPermissionRepository", repository):
        return asyncio.run(get_permissions_grouped_by_user(MagicMock(), 1))


# =============================================================================
# Validation Properties
# =============================================================================


class TestBlankProperties:
    @given(st.text())
    @hypothesis_settings
    def test_is_blank_matches_strip(self, value: str):
        assert is_blank(value) == (value.strip() == "")

    @given(st.integers())
    @hypothesis_settings
    def test_non_strings_are_never_blank(self, value: int):
        assert is_blank(value) is False

    @given(st.text().filter(lambda s: s.strip() == ""))
    @hypothesis_settings
    def test_blank_name_always_rejected(self, name: str):
        with pytest.raises(ValidationError):
            center_service.validate(CenterCreate(name=name))


class TestIdProperties:
    @given(st.integers(max_value=0))
    @hypothesis_settings
    def test_non_positive_ids_rejected(self, value: int):
        with pytest.raises(ValidationError):
            require_positive_id(value)

    @given(st.integers(min_value=1))
    @hypothesis_settings
    def test_positive_ids_returned(self, value: int):
        assert require_positive_id(value) == value


# =============================================================================
# Aggregation Properties
# =============================================================================


class TestGroupedPermissionProperties:
    @given(permission_rows())
    @hypothesis_settings
    def test_no_duplicate_permission_names(self, rows: list[PermissionRow]):
        for rol in _grouped(rows):
            for form in rol.forms:
                assert len(form.permissions) == len(set(form.permissions))

    @given(permission_rows())
    @hypothesis_settings
    def test_every_row_is_represented(self, rows: list[PermissionRow]):
        grouped = {
            (rol.rol, form.name, name)
            for rol in _grouped(rows)
            for form in rol.forms
            for name in form.permissions
        }
        assert grouped == {(r.rol, r.form, r.permission) for r in rows}

    @given(permission_rows())
    @hypothesis_settings
    def test_roles_keep_first_seen_order(self, rows: list[PermissionRow]):
        expected = list(dict.fromkeys(r.rol for r in rows))
        assert [rol.rol for rol in _grouped(rows)] == expected
