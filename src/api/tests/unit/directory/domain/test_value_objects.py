"""Unit tests for directory value objects."""

import pytest

from directory.domain.value_objects import (
    OrganizationId,
    SpaceId,
    TenantScope,
    UserRefId,
    make_initials,
    normalize_domain,
    normalize_email,
)


class TestIdentifiers:
    """Tests for ULID-backed identifiers."""

    @pytest.mark.parametrize("id_type", [UserRefId, OrganizationId, SpaceId])
    def test_generate_round_trips_through_from_string(self, id_type):
        generated = id_type.generate()

        assert id_type.from_string(generated.value) == generated
        assert str(generated) == generated.value

    @pytest.mark.parametrize("id_type", [UserRefId, OrganizationId, SpaceId])
    def test_from_string_rejects_non_ulid(self, id_type):
        with pytest.raises(ValueError, match=f"Invalid {id_type.__name__}"):
            id_type.from_string("not-a-ulid")


class TestTenantScope:
    """Tests for TenantScope."""

    def test_for_org_parses_reference_id(self):
        org_id = OrganizationId.generate()

        scope = TenantScope.for_org(org_id.value)

        assert scope.org_id == org_id
        assert str(scope) == f"TenantScope({org_id.value})"

    def test_for_org_rejects_invalid_id(self):
        with pytest.raises(ValueError):
            TenantScope.for_org("acme")


class TestNormalization:
    """Tests for email and domain normalization."""

    def test_normalize_email_trims_and_lowers(self):
        assert normalize_email("  Alice@ACME.com\t") == "alice@acme.com"

    def test_normalize_email_is_idempotent(self):
        once = normalize_email(" Bob@Example.COM ")

        assert normalize_email(once) == once

    def test_normalize_domain_trims_and_lowers(self):
        assert normalize_domain(" Acme.COM ") == "acme.com"


class TestMakeInitials:
    """Tests for make_initials."""

    def test_takes_first_letters(self):
        assert make_initials("grace", "hopper") == "GH"

    def test_skips_blank_names(self):
        assert make_initials("", " Hopper") == "H"
        assert make_initials("", "") == ""
