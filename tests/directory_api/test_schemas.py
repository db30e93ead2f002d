"""Tests for Pydantic schemas."""

import pytest
from pydantic import ValidationError

from directory_api.schemas.company import Company, CompanyCreate
from directory_api.schemas.representative import (
    Representative,
    RepresentativeCreate,
    RepresentativeReference,
)


class TestRepresentativeSchemas:
    """Tests for representative schemas."""

    def test_accepts_camel_case(self):
        """Wire names are camelCase."""
        rep = RepresentativeCreate.model_validate({"firstName": "John", "lastName": "Doe"})
        assert rep.first_name == "John"
        assert rep.last_name == "Doe"

    def test_accepts_field_names(self):
        """Python field names work too."""
        rep = RepresentativeCreate(first_name="John", last_name="Doe")
        assert rep.first_name == "John"

    def test_serializes_camel_case(self):
        """Dumping by alias yields the wire shape."""
        rep = Representative(id=1, first_name="John", last_name="Doe")
        assert rep.model_dump(by_alias=True) == {"id": 1, "firstName": "John", "lastName": "Doe"}

    @pytest.mark.parametrize("value", ["", "   ", "\t"])
    def test_blank_rejected(self, value):
        """Blank or whitespace-only names are rejected."""
        with pytest.raises(ValidationError, match="First name must not be blank"):
            RepresentativeCreate(first_name=value, last_name="Doe")

    def test_too_long_rejected(self):
        """More than 255 characters is rejected."""
        with pytest.raises(ValidationError, match="Last name must not exceed 255 characters"):
            RepresentativeCreate(first_name="John", last_name="x" * 256)

    def test_reference_only_needs_id(self):
        """References carry an ID; names are optional."""
        ref = RepresentativeReference.model_validate({"id": 3})
        assert ref.id == 3
        assert ref.first_name is None

    def test_reference_requires_id(self):
        """A reference without an ID is invalid."""
        with pytest.raises(ValidationError):
            RepresentativeReference.model_validate({"firstName": "John", "lastName": "Doe"})


class TestCompanySchemas:
    """Tests for company schemas."""

    def test_create_without_representatives(self):
        """Omitted representatives stay None (no change on update)."""
        company = CompanyCreate(name="Acme Corporation")
        assert company.representatives is None

    def test_create_with_empty_representatives(self):
        """Explicit empty list is kept distinct from omission."""
        company = CompanyCreate.model_validate({"name": "Acme", "representatives": []})
        assert company.representatives == []

    def test_blank_name_rejected(self):
        """Blank name is rejected."""
        with pytest.raises(ValidationError, match="Name must not be blank"):
            CompanyCreate(name=" ")

    def test_full_company_shape(self):
        """Full schema dumps to the wire shape."""
        company = Company(
            id=1,
            name="Acme Corporation",
            representatives=[Representative(id=1, first_name="John", last_name="Doe")],
        )
        assert company.model_dump(by_alias=True) == {
            "id": 1,
            "name": "Acme Corporation",
            "representatives": [{"id": 1, "firstName": "John", "lastName": "Doe"}],
        }
