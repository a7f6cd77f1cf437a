"""Tests for the bootstrap policy flags."""

from dataclasses import FrozenInstanceError

import pytest

from linkstore.init_defaults import BootstrapPolicy


class TestDefaults:

    def test_every_flag_enabled_by_default(self):
        policy = BootstrapPolicy()
        assert all(enabled for _, enabled in policy.steps())

    def test_step_count_and_order(self):
        names = BootstrapPolicy.step_names()
        assert len(names) == 18
        assert names[0] == "include_core_funcs"
        assert names[-1] == "init_admin"
        assert names.index("include_db") < names.index("return_if_fast_init") < names.index("get_all_options")


class TestOverrides:

    def test_keyword_override(self):
        policy = BootstrapPolicy(check_new_version=False, redirect_ssl=False)
        assert policy.check_new_version is False
        assert policy.redirect_ssl is False
        assert policy.load_plugins is True

    def test_read_only_after_construction(self):
        policy = BootstrapPolicy()
        with pytest.raises(FrozenInstanceError):
            policy.include_db = False

    def test_without_disables_named_steps(self):
        policy = BootstrapPolicy().without("check_new_version", "load_plugins")
        disabled = [name for name, enabled in policy.steps() if not enabled]
        assert disabled == ["load_plugins", "check_new_version"]

    def test_without_returns_a_copy(self):
        base = BootstrapPolicy()
        base.without("include_db")
        assert base.include_db is True

    def test_without_rejects_unknown_step(self):
        with pytest.raises(ValueError, match="not_a_step"):
            BootstrapPolicy().without("not_a_step")
