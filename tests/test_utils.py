import logging

from pytest import raises

import modality.utils as util
from modality import g, reset_config, set_config


def test_func():
    assert util.make_default(None, 0) == 0
    assert util.make_default(False, True) is False


def test_call():
    def no_args():
        return "none"

    def one(a):
        return a

    def varargs(*args):
        return args

    def kwfunc(a, b=2, *, d="123"):
        return a, b, d

    assert util.call(no_args, 1, 2) == "none"
    assert util.call(one, 1, 2) == 1
    assert util.call(varargs, 1, 2) == (1, 2)
    assert util.call(kwfunc, 1, 5, 6, d=3) == (1, 5, 3)
    assert util.call(len, [1, 2]) == 2


def test_call_safely(caplog):
    def broken():
        raise ValueError("nope")

    with caplog.at_level(logging.ERROR):
        assert not util.call_safely(broken, "event")
    assert "nope" in caplog.text
    assert util.call_safely(lambda e: e, "event")


def test_unique_id():
    set_config(id_prefix="modal-")
    assert util.unique_id().startswith("modal-")
    assert util.unique_id() != util.unique_id()


def test_config():
    with raises(ValueError):
        set_config(fps=60)
    set_config(forward_denied_events=False, stop_propagation=None)
    assert g["forward_denied_events"] is False
    assert g["stop_propagation"] is True
    reset_config()
    assert g["forward_denied_events"] is True
