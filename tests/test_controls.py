import pytest

from breakout.controls import InputLatch


@pytest.mark.parametrize("key", ["Left", "ArrowLeft"])
def test_left_keys(key):
    latch = InputLatch()
    assert latch.key_down(key)
    assert latch.apply() == (True, False)
    assert latch.key_up(key)
    assert latch.apply() == (False, False)


@pytest.mark.parametrize("key", ["Right", "ArrowRight"])
def test_right_keys(key):
    latch = InputLatch()
    latch.key_down(key)
    assert latch.apply() == (False, True)


def test_updates_wait_for_apply():
    latch = InputLatch()
    latch.set_left_held(True)
    latch.set_right_held(True)
    assert not latch.left_held
    assert not latch.right_held
    assert latch.pending == 2

    latch.apply()
    assert latch.left_held and latch.right_held
    assert latch.pending == 0


def test_updates_apply_in_order():
    latch = InputLatch()
    latch.key_down("Left")
    latch.key_up("Left")
    latch.key_down("Left")
    assert latch.apply() == (True, False)


def test_unknown_keys_are_ignored():
    latch = InputLatch()
    assert not latch.key_down("Space")
    assert not latch.key_up("a")
    assert latch.pending == 0


def test_clear():
    latch = InputLatch()
    latch.key_down("Right")
    latch.apply()
    latch.key_down("Left")
    latch.clear()
    assert latch.pending == 0
    assert latch.apply() == (False, False)
