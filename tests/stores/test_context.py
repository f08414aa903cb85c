"""Tests for the shared data context"""

from dataclasses import FrozenInstanceError, replace
from datetime import date

import pytest

from finview_app.config.defaults import get_default_config
from finview_app.stores import DataContext, DataContextProvider, build_context

TODAY = date(2026, 10, 18)


class TestBuildContext:
    """Test explicit context construction"""

    def test_contains_mock_and_historical_years(self):
        context = build_context(today=TODAY, seed=5)

        assert context.built_for == TODAY
        assert context.mock.index_names == ("SP500", "DOW")
        assert sorted(context.historical) == [2024, 2025]
        assert context.historical_year(2024)["SP500"]

    def test_selected_years(self):
        context = build_context(today=TODAY, seed=5, years=[2025])
        assert list(context.historical) == [2025]
        with pytest.raises(KeyError):
            context.historical_year(2024)

    def test_seeded_contexts_match(self):
        first = build_context(today=TODAY, seed=9)
        second = build_context(today=TODAY, seed=9)
        assert first.mock.to_dict() == second.mock.to_dict()

    def test_context_is_immutable(self):
        context = build_context(today=TODAY, seed=5)
        with pytest.raises(FrozenInstanceError):
            context.mock = None
        with pytest.raises(TypeError):
            context.historical[2030] = context.historical[2024]
        with pytest.raises(TypeError):
            context.mock.series["SP500"] = ()

    def test_uses_given_config(self):
        base = get_default_config()
        config = replace(base, snapshots=replace(base.snapshots, years=(2025,)))

        context = build_context(config, today=TODAY, seed=5)
        assert list(context.historical) == [2025]


class TestDataContextProvider:
    """Test lazy shared access and wholesale reload"""

    def test_builds_lazily_once(self):
        provider = DataContextProvider(today=TODAY, seed=1)
        assert not provider.is_built

        first = provider.get()
        assert provider.is_built
        assert isinstance(first, DataContext)
        assert provider.get() is first

    def test_reload_replaces_context(self):
        provider = DataContextProvider(today=TODAY, seed=1)
        first = provider.get()

        reloaded = provider.reload()

        assert reloaded is not first
        assert provider.get() is reloaded
        # The old context is still intact for readers holding it
        assert first.mock.to_dict() == reloaded.mock.to_dict()

    def test_reload_with_new_config(self):
        provider = DataContextProvider(today=TODAY, seed=1)
        provider.get()
        base = get_default_config()
        config = replace(base, snapshots=replace(base.snapshots, years=(2025,)))

        reloaded = provider.reload(config)

        assert provider.config is config
        assert list(reloaded.historical) == [2025]
        assert provider.get() is reloaded
