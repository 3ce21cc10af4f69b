"""Device parsing and equality."""
import pytest

import sapling


def test_device_parsing():
    d0 = sapling.device('cuda:0')
    d1 = sapling.device('cuda:1')
    assert d0.type == 'cuda' and d0.index == 0, f"Bad d0: {d0}"
    assert d1.type == 'cuda' and d1.index == 1, f"Bad d1: {d1}"
    assert str(d1) == 'cuda:1'
    assert repr(d0) == "device(type='cuda', index=0)"


def test_bare_cuda_means_index_zero():
    assert sapling.device('cuda') == sapling.device('cuda:0')
    assert sapling.device('cuda') == 'cuda:0'
    assert hash(sapling.device('cuda')) == hash(sapling.device('cuda', 0))


def test_cpu_device():
    cpu = sapling.device()
    assert cpu.type == 'cpu' and cpu.index is None
    assert cpu.is_host
    assert not sapling.device('cuda').is_host
    assert cpu != sapling.device('cuda')
    assert str(cpu) == 'cpu'


def test_copy_constructor():
    d = sapling.device('cuda:2')
    assert sapling.device(d) == d


@pytest.mark.parametrize('bad', ['mps', 'tpu:0', 'cuda:-1', 'cpu:1'])
def test_invalid_device(bad):
    with pytest.raises(ValueError):
        sapling.device(bad)
