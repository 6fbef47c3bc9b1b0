from collections import deque

# Browser-style key names; both spellings are accepted for each arrow.
LEFT_KEYS = ("Left", "ArrowLeft")
RIGHT_KEYS = ("Right", "ArrowRight")


class InputLatch:
    """
    Two held-key flags for the paddle.

    Key handlers only queue updates; the frame driver calls :meth:`apply` at
    the start of each frame so the flags never change in the middle of an
    update.
    """

    def __init__(self):
        self.left_held = False
        self.right_held = False
        self._queue = deque()

    def set_left_held(self, held):
        self._queue.append(("left", bool(held)))

    def set_right_held(self, held):
        self._queue.append(("right", bool(held)))

    def key_down(self, key):
        return self._key(key, True)

    def key_up(self, key):
        return self._key(key, False)

    def _key(self, key, held):
        if key in RIGHT_KEYS:
            self.set_right_held(held)
        elif key in LEFT_KEYS:
            self.set_left_held(held)
        else:
            return False
        return True

    @property
    def pending(self):
        return len(self._queue)

    def apply(self):
        while self._queue:
            side, held = self._queue.popleft()
            if side == "left":
                self.left_held = held
            else:
                self.right_held = held
        return self.left_held, self.right_held

    def clear(self):
        self._queue.clear()
        self.left_held = False
        self.right_held = False
