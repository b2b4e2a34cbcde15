import pytest

from drillbox.flyweight import ConcreteFlyWeight, FlyWeight, FlyWeightFactory, main


def test_factory_returns_shared_instance():
    factory = FlyWeightFactory()
    first = factory.get_flyweight(0)
    assert isinstance(first, ConcreteFlyWeight)
    assert factory.get_flyweight(0) is first


@pytest.mark.parametrize("key", [1, -1, 10])
def test_unknown_key_raises(key):
    with pytest.raises(IndexError):
        FlyWeightFactory().get_flyweight(key)


def test_operation_prints_name(capsys):
    ConcreteFlyWeight().operation()
    assert capsys.readouterr().out == "ConcreteFlyWeight\n"


def test_abstract_flyweight_cannot_be_created():
    with pytest.raises(TypeError):
        FlyWeight()


def test_main_runs_operation(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "ConcreteFlyWeight\n"