"""Unit tests for identity input models."""

import pytest
from pydantic import ValidationError

from persona.domain.model import IdentityDraft, IdentityPatch
from persona.domain.value import IdentityContext, SearchQuery


class TestIdentityDraft:
    """Validation of new identities."""

    def test_personal_name_is_trimmed(self):
        draft = IdentityDraft(personal_name="  Alex  ", context="work")
        assert draft.personal_name == "Alex"
        assert draft.context is IdentityContext.WORK

    @pytest.mark.parametrize("name", ["", "   ", "x" * 256])
    def test_personal_name_length_is_enforced(self, name):
        with pytest.raises(ValidationError):
            IdentityDraft(personal_name=name, context="work")

    def test_unknown_context_is_rejected(self):
        with pytest.raises(ValidationError):
            IdentityDraft(personal_name="Alex", context="space")

    def test_social_links_must_be_urls(self):
        with pytest.raises(ValidationError):
            IdentityDraft(
                personal_name="Alex",
                context="social",
                social_links={"mastodon": "not a url"},
            )

    def test_valid_social_links_are_kept_verbatim(self):
        draft = IdentityDraft(
            personal_name="Alex",
            context="social",
            social_links={"github": "https://github.com/alex"},
        )
        assert draft.social_links == {"github": "https://github.com/alex"}

    def test_defaults(self):
        draft = IdentityDraft(personal_name="Alex", context="legal")
        assert draft.other_names == []
        assert draft.social_links == {}
        assert draft.is_primary is False
        assert draft.is_discoverable is False


class TestIdentityPatch:
    """Validation and change extraction of partial updates."""

    def test_changes_contains_only_sent_fields(self):
        patch = IdentityPatch.model_validate({"title": "Lead"})
        assert patch.changes() == {"title": "Lead"}

    def test_explicit_null_clears_optional_fields(self):
        patch = IdentityPatch.model_validate(
            {"pronouns": None, "other_names": None, "social_links": None}
        )
        assert patch.changes() == {"pronouns": None, "other_names": [], "social_links": {}}

    def test_null_flags_are_ignored(self):
        patch = IdentityPatch.model_validate({"is_primary": None})
        assert patch.changes() == {}

    @pytest.mark.parametrize("field", ["personal_name", "context"])
    def test_null_required_field_is_rejected(self, field):
        with pytest.raises(ValidationError):
            IdentityPatch.model_validate({field: None})

    def test_blank_personal_name_is_rejected(self):
        with pytest.raises(ValidationError):
            IdentityPatch(personal_name="  ")


class TestSearchQuery:
    """Search parameter normalization."""

    def test_blank_query_becomes_none(self):
        assert SearchQuery(context="work", q="  ").q is None

    def test_query_is_trimmed(self):
        assert SearchQuery(context="work", q=" alex ").q == "alex"
