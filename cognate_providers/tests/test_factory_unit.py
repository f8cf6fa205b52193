from __future__ import annotations

import pytest

from cognate_providers import create
from cognate_providers.base.errors import ErrorCode, ProviderError
from cognate_providers.base.factory import ProviderFactory, UnknownProviderError
from cognate_providers.tests.utils import ScriptedAdapter


def test_factory_unknown_provider():
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("nope")


def test_factory_supported_ids():
    assert ProviderFactory.supported() == ("openai", "anthropic", "google", "deepseek")
    assert ProviderFactory.is_supported(" OpenAI ")
    assert not ProviderFactory.is_supported("mistral")


def test_factory_import_failure(isolated_factory):
    isolated_factory.register("bogus", ("does.not.exist", "X"))
    with pytest.raises(UnknownProviderError):
        isolated_factory.create("bogus")


def test_factory_missing_class(isolated_factory):
    isolated_factory.register("bogus", ("cognate_providers.openai.client", "NoSuchAdapter"))
    with pytest.raises(UnknownProviderError):
        isolated_factory.create("bogus")


def test_register_does_not_leak_into_base(isolated_factory):
    isolated_factory.register("fake", lambda: ScriptedAdapter("fake"))
    assert isolated_factory.create("fake").provider_id == "fake"
    assert not ProviderFactory.is_supported("fake")


def test_builtin_adapters_construct_without_credentials():
    for provider_id in ProviderFactory.supported():
        adapter = ProviderFactory.create(provider_id)
        assert adapter.provider_name == provider_id


def test_package_create_wraps_unknown_provider():
    with pytest.raises(ProviderError) as info:
        create("nope")
    assert info.value.code is ErrorCode.UNSUPPORTED_PROVIDER
