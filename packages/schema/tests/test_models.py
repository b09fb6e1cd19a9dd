"""
Comprehensive tests for wpsync schema models.

Tests cover:
- Component descriptors (coercion, immutability, exact category)
- Repository descriptors and resolution results
- Unresolved items and their report rows
- Lenient parsing of the pro repository manifest
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from wpsync_schema import (
    ComponentDescriptor,
    ComponentKind,
    ProPackage,
    ProRepositoryDefinition,
    ProRepositoryManifest,
    RepositoryDescriptor,
    ResolutionResult,
    UnresolvedItem,
    ValidationError,
)


# =============================================================================
# COMPONENT DESCRIPTOR TESTS
# =============================================================================


class TestComponentDescriptor:
    """Test ComponentDescriptor model"""

    def test_minimal(self):
        descriptor = ComponentDescriptor(kind="plugin", display_name="Akismet")
        assert descriptor.kind == ComponentKind.PLUGIN
        assert descriptor.raw_version == ""
        assert descriptor.slug == ""
        assert descriptor.single_file is False

    @pytest.mark.parametrize("raw,expected", [(None, ""), (5, "5"), (6.4, "6.4"), (" 1.2.3 ", "1.2.3")])
    def test_version_coercion(self, raw, expected):
        descriptor = ComponentDescriptor(kind="theme", display_name="Astra", raw_version=raw)
        assert descriptor.raw_version == expected

    def test_exact_category(self):
        assert ComponentDescriptor(kind="mu-plugin", display_name="Loader").is_exact_category is True
        assert ComponentDescriptor(kind="plugin", display_name="Akismet").is_exact_category is False

    def test_unknown_kind_rejected(self):
        with pytest.raises(PydanticValidationError):
            ComponentDescriptor(kind="widget", display_name="Nope")

    def test_frozen(self):
        descriptor = ComponentDescriptor(kind="plugin", display_name="Akismet")
        with pytest.raises(PydanticValidationError):
            descriptor.slug = "other"


# =============================================================================
# RESOLUTION TESTS
# =============================================================================


class TestRepositoryDescriptor:
    """Test RepositoryDescriptor model"""

    def test_default_type(self):
        repository = RepositoryDescriptor(url="https://wpackagist.org")
        assert repository.to_manifest() == {"type": "composer", "url": "https://wpackagist.org"}

    def test_empty_url_rejected(self):
        with pytest.raises(ValidationError):
            RepositoryDescriptor(url="  ")

    def test_equal_by_value(self):
        assert RepositoryDescriptor(url="https://a.example.com") == RepositoryDescriptor(
            type="composer", url="https://a.example.com"
        )


class TestResolutionResult:
    """Test ResolutionResult model"""

    def test_failure_is_all_none(self):
        result = ResolutionResult.failure()
        assert result.package_id is None
        assert result.constraint is None
        assert result.repository is None
        assert result.is_resolved is False

    def test_resolved(self):
        result = ResolutionResult(package_id="roots/wordpress", constraint="^6.4")
        assert result.is_resolved is True


class TestUnresolvedItem:
    """Test UnresolvedItem model"""

    def test_from_descriptor(self):
        descriptor = ComponentDescriptor(kind="plugin", display_name="Private", raw_version="1.0", slug="private")
        item = UnresolvedItem.from_descriptor(descriptor)
        assert item.to_row() == {"name": "Private", "version": "1.0", "type": "plugin", "slug": "private"}
        assert item.is_single_file is False

    def test_single_file_suffix(self):
        descriptor = ComponentDescriptor(
            kind="mu-plugin", display_name="Tweaks", raw_version="0.1", slug="tweaks", single_file=True
        )
        item = UnresolvedItem.from_descriptor(descriptor)
        assert item.name == "Tweaks (single file)"
        assert item.is_single_file is True
        assert item.to_row()["type"] == "mu-plugin"


# =============================================================================
# PRO REPOSITORY MANIFEST TESTS
# =============================================================================


class TestProRepositoryManifest:
    """Test the lenient pro repository manifest"""

    def test_simple_and_extended_entries(self):
        definition = ProRepositoryDefinition.model_validate(
            {
                "url": "https://connect.advancedcustomfields.com",
                "plugins": {
                    "Advanced Custom Fields Pro": {
                        "package": "advanced-custom-fields/advanced-custom-fields-pro",
                        "slug": "advanced-custom-fields-pro",
                    },
                    "ACF Extended": "acf/extended",
                },
            }
        )
        extended = definition.plugins["Advanced Custom Fields Pro"]
        assert isinstance(extended, ProPackage)
        assert extended.slug == "advanced-custom-fields-pro"
        assert definition.plugins["ACF Extended"] == "acf/extended"
        assert definition.to_repository() == RepositoryDescriptor(url="https://connect.advancedcustomfields.com")

    def test_malformed_entries_dropped(self):
        definition = ProRepositoryDefinition.model_validate(
            {
                "url": "https://repo.example.com",
                "type": None,
                "plugins": {"Good": "a/good", "No Package": {"slug": "x"}, "Number": 3, "List": ["a/b"]},
            }
        )
        assert list(definition.plugins) == ["Good"]
        assert definition.type == "composer"

    def test_plugins_not_a_dict(self):
        definition = ProRepositoryDefinition.model_validate({"url": "https://repo.example.com", "plugins": []})
        assert definition.plugins == {}

    def test_repositories_without_url_dropped(self):
        manifest = ProRepositoryManifest.model_validate(
            {
                "repositories": [
                    {"url": "https://a.example.com", "plugins": {"A": "a/a"}},
                    {"plugins": {"B": "b/b"}},
                    {"url": "", "plugins": {}},
                    {"url": "   ", "plugins": {"X": "x/x"}},
                    {"url": 42, "plugins": {"Y": "y/y"}},
                    "not a dict",
                ]
            }
        )
        assert [repo.url for repo in manifest.repositories] == ["https://a.example.com"]

    def test_repositories_must_be_list(self):
        with pytest.raises(ValidationError):
            ProRepositoryManifest.model_validate({"repositories": {"url": "https://a.example.com"}})

    def test_order_preserved(self):
        manifest = ProRepositoryManifest.model_validate(
            {"repositories": [{"url": f"https://{n}.example.com"} for n in ("c", "a", "b")]}
        )
        assert [repo.url for repo in manifest.repositories] == [
            "https://c.example.com",
            "https://a.example.com",
            "https://b.example.com",
        ]
