import pytest

from kdfid import parameters


def test_defaults():
    params = parameters.init_kdf_params()
    assert params.mem_kib    == 65536
    assert params.iterations == 3
    assert params.lanes      == 1
    assert params.out_len    == 32


def test_overrides():
    params = parameters.init_kdf_params(mem_kib=1024, lanes=4)
    assert params == parameters.KDFParams(mem_kib=1024, iterations=3, lanes=4, out_len=32)

    params = parameters.init_kdf_params(iterations=1, out_len=64)
    assert params == parameters.KDFParams(mem_kib=65536, iterations=1, lanes=1, out_len=64)


def test_zero_is_not_replaced_by_default():
    # semantic validation is left to the kdf
    params = parameters.init_kdf_params(mem_kib=0, iterations=0, lanes=0, out_len=0)
    assert params == parameters.KDFParams(0, 0, 0, 0)


@pytest.mark.parametrize("kwargs", [
    {'mem_kib'   : -1},
    {'iterations': 2 ** 32},
    {'lanes'     : 1.5},
    {'out_len'   : "32"},
])
def test_invalid_shape(kwargs):
    try:
        parameters.init_kdf_params(**kwargs)
        assert False, f"expected TypeError for {kwargs}"
    except TypeError:
        pass


def test_format_params():
    params = parameters.init_kdf_params()
    assert parameters.format_params(params) == "mem_kib=65536 iterations=3 lanes=1 out_len=32"
