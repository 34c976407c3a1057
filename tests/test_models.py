"""
Tests for the module model and list ordering.
"""

import random
import string

import pytest

from gomodup.core.exceptions import ModuleDataError
from gomodup.core.models import Module, ModuleUpdate, sort_modules, updatable_modules

from tests.conftest import make_module


class TestModuleRecord:
    """Building modules from go list records."""

    def test_full_record(self):
        module = Module.from_record({
            "Path": "golang.org/x/text",
            "Version": "v0.3.0",
            "Update": {"Path": "golang.org/x/text", "Version": "v0.14.0"},
            "Indirect": True,
        })

        assert module.path == "golang.org/x/text"
        assert module.version == "v0.3.0"
        assert module.update == ModuleUpdate("golang.org/x/text", "v0.14.0")
        assert module.indirect is True
        assert module.main is False
        assert module.target == "golang.org/x/text@v0.14.0"

    def test_main_module_without_version(self):
        module = Module.from_record({"Path": "example.com/app", "Main": True})

        assert module.main is True
        assert module.version == ""
        assert module.update is None
        assert not module.is_updatable

    def test_record_round_trips_field_names(self):
        record = {
            "Path": "github.com/pkg/errors",
            "Version": "v0.8.0",
            "Update": {"Path": "github.com/pkg/errors", "Version": "v0.9.1"},
        }
        assert Module.from_record(record).to_record() == record

    @pytest.mark.parametrize("record", [
        [],
        "github.com/pkg/errors",
        {"Version": "v1.0.0"},
        {"Path": ""},
        {"Path": "a", "Update": "v2"},
        {"Path": "a", "Update": {"Path": "a"}},
    ])
    def test_malformed_records_are_rejected(self, record):
        with pytest.raises(ModuleDataError):
            Module.from_record(record)

    def test_target_requires_update(self):
        with pytest.raises(ModuleDataError):
            make_module("a", latest=None).target


class TestOrdering:
    """Direct modules first, then indirect, each sorted by path."""

    def test_direct_before_indirect(self):
        # Five direct and three indirect modules in scrambled order
        modules = [
            make_module("github.com/z/direct"),
            make_module("golang.org/x/sys", indirect=True),
            make_module("github.com/a/direct"),
            make_module("github.com/m/direct"),
            make_module("cloud.google.com/go", indirect=True),
            make_module("gopkg.in/yaml.v3"),
            make_module("github.com/b/indirect", indirect=True),
            make_module("example.com/direct"),
        ]

        ordered = [m.path for m in sort_modules(modules)]

        assert ordered == [
            "example.com/direct",
            "github.com/a/direct",
            "github.com/m/direct",
            "github.com/z/direct",
            "gopkg.in/yaml.v3",
            "cloud.google.com/go",
            "github.com/b/indirect",
            "golang.org/x/sys",
        ]

    @pytest.mark.parametrize("seed", range(25))
    def test_ordering_property_on_random_lists(self, seed):
        rng = random.Random(seed)
        prefixes = ["github.com/a", "github.com/a/b", "github.com/ab", "golang.org/x"]
        modules = [
            make_module(
                rng.choice(prefixes) + "".join(rng.choice(string.ascii_lowercase + "/-.") for _ in range(rng.randint(0, 4))),
                indirect=rng.random() < 0.4,
            )
            for _ in range(rng.randint(0, 40))
        ]

        ordered = sort_modules(modules)

        assert sorted(ordered, key=id) == sorted(modules, key=id)
        flags = [m.indirect for m in ordered]
        assert flags == sorted(flags)
        for group in (False, True):
            paths = [m.path for m in ordered if m.indirect is group]
            assert all(a <= b for a, b in zip(paths, paths[1:]))

    def test_updatable_modules_filters_main_and_current(self):
        modules = [
            make_module("example.com/app", main=True),
            make_module("example.com/current", latest=None),
            make_module("example.com/stale"),
        ]

        assert [m.path for m in updatable_modules(modules)] == ["example.com/stale"]
