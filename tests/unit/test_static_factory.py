import pytest
from unittest.mock import patch
from patternkit.patterns import ProviderFramework, DefaultModule, ModuleA, ModuleB, Metadata

@pytest.fixture(autouse=True)
def reset_provider():
    ProviderFramework._modules = None
    yield
    ProviderFramework._modules = None

def test_get_defined_instance():
    assert isinstance(ProviderFramework.get_instance("moduleA"), ModuleA)
    assert isinstance(ProviderFramework.get_instance("moduleB"), ModuleB)

def test_get_undefined_instance_returns_default():
    assert isinstance(ProviderFramework.get_instance("bogus"), DefaultModule)

def test_metadata_read_once():
    with patch.object(Metadata, "get_modules", return_value={"moduleA": ModuleA}) as get_modules:
        ProviderFramework.get_instance("moduleA")
        ProviderFramework.get_instance("moduleB")

    get_modules.assert_called_once()

def test_fresh_instance_per_call():
    assert ProviderFramework.get_instance("moduleA") is not ProviderFramework.get_instance("moduleA")
