"""Tests for endpoint descriptors and the registry."""

import dataclasses

import pytest

from gw2api import ENDPOINTS, ConfigurationError, Endpoint, Session


class TestEndpoint:
    """Descriptor construction and invariants."""

    def test_defaults(self):
        ep = Endpoint(name="build", path="/v2/build")

        assert ep.url == "https://api.guildwars2.com/v2/build"
        assert ep.max_page_size == 200
        assert ep.flags() == []

    def test_flags_lists_enabled_capabilities(self):
        ep = Endpoint(name="worlds", path="/v2/worlds", bulk=True, bulk_all=True, localized=True)

        assert ep.flags() == ["bulk", "bulk_all", "localized"]

    def test_is_immutable(self):
        ep = Endpoint(name="items", path="/v2/items")

        with pytest.raises(dataclasses.FrozenInstanceError):
            ep.bulk = True

    def test_path_must_start_with_slash(self):
        with pytest.raises(ConfigurationError):
            Endpoint(name="items", path="v2/items")

    @pytest.mark.parametrize("size", [0, -5, 2.5, True])
    def test_max_page_size_must_be_positive_integer(self, size):
        with pytest.raises(ConfigurationError):
            Endpoint(name="items", path="/v2/items", paginated=True, max_page_size=size)

    def test_bulk_all_requires_bulk_or_paginated(self):
        with pytest.raises(ConfigurationError):
            Endpoint(name="colors", path="/v2/colors", bulk_all=True)

        assert Endpoint(name="colors", path="/v2/colors", bulk_all=True, paginated=True).bulk_all

    def test_custom_base_url(self):
        ep = Endpoint(name="items", path="/v2/items", base_url="http://localhost:8000/")

        assert ep.url == "http://localhost:8000/v2/items"


class TestRegistry:
    """The shipped endpoint declarations."""

    def test_names_match_keys(self):
        for name, ep in ENDPOINTS.items():
            assert ep.name == name
            assert ep.path.startswith("/v2/")

    def test_representative_capabilities(self):
        assert ENDPOINTS["account"].authenticated
        assert ENDPOINTS["account.bank"].authenticated
        assert ENDPOINTS["items"].bulk and ENDPOINTS["items"].paginated
        assert ENDPOINTS["recipes"].bulk and not ENDPOINTS["recipes"].localized
        assert ENDPOINTS["worlds"].bulk_all


def test_session_defaults():
    session = Session()

    assert session.api_key is None
    assert session.locale == "en"
