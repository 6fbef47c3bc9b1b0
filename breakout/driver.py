"""
The frame loop.

:class:`FrameScheduler` stands in for the display's "call me on the next
refresh" primitive: callbacks requested now run on the next
:meth:`FrameScheduler.run_pending` tick. :class:`FrameDriver` runs one frame
per tick and re-requests itself, so at most one frame is ever outstanding.
"""
from breakout import config
from breakout import physics
from breakout.physics import Outcome


class FrameScheduler:
    def __init__(self):
        self._next_handle = 1
        self._callbacks = {}
        self._due = {}

    def request(self, callback):
        handle = self._next_handle
        self._next_handle += 1
        self._callbacks[handle] = callback
        return handle

    def cancel(self, handle):
        if handle is None:
            return
        self._callbacks.pop(handle, None)
        self._due.pop(handle, None)

    @property
    def pending(self):
        return len(self._callbacks) + len(self._due)

    def run_pending(self):
        """Run the callbacks requested before this tick; new requests wait for the next one."""
        self._due, self._callbacks = self._callbacks, {}
        ran = 0
        while self._due:
            handle = next(iter(self._due))
            callback = self._due.pop(handle)
            callback()
            ran += 1
        return ran


class Phase:
    STOPPED = "STOPPED"
    RUNNING = "RUNNING"
    RESETTING = "RESETTING"


class FrameDriver:
    """
    Drives a :class:`~breakout.state.GameSession` one frame per scheduler tick.

    Args:
        session: the game state to advance.
        scheduler: where the next frame is requested; a private
            :class:`FrameScheduler` when omitted.
        notify: called with ``"Game over!"`` or ``"You Win!"`` when a round
            ends. It may block; play resumes only after it returns.
        render: called with a :class:`~breakout.state.Snapshot` after every
            frame that did not end the round.
    """

    def __init__(self, session, scheduler=None, notify=None, render=None):
        self.session = session
        self.scheduler = scheduler if scheduler is not None else FrameScheduler()
        self.notify = notify if notify is not None else (lambda message: None)
        self.render = render
        self.phase = Phase.STOPPED
        self.last_outcome = Outcome.NONE
        self.last_broken = []
        self._frame_request = None
        self._in_frame = False

    # --- Input, forwarded to the session's latch ---
    def set_left_held(self, held):
        self.session.latch.set_left_held(held)

    def set_right_held(self, held):
        self.session.latch.set_right_held(held)

    def key_down(self, key):
        return self.session.latch.key_down(key)

    def key_up(self, key):
        return self.session.latch.key_up(key)

    # --- Lifecycle ---
    @property
    def running(self):
        return self.phase != Phase.STOPPED

    def start(self):
        if self.phase != Phase.STOPPED:
            return
        self.phase = Phase.RUNNING
        self.advance_frame()

    def stop(self):
        self._cancel_frame()
        self.phase = Phase.STOPPED

    def advance_frame(self):
        # Replaces any frame already scheduled rather than adding a second loop
        self._cancel_frame()
        self._run_frames()

    def _on_tick(self):
        self._frame_request = None
        self._run_frames()

    def _run_frames(self):
        while self.phase != Phase.STOPPED:
            self._in_frame = True
            try:
                self._frame()
            finally:
                self._in_frame = False
            if self.phase != Phase.RESETTING:
                break
            # The round ended inside that frame; run the restart frame now
            self.phase = Phase.RUNNING

    def reset_round(self):
        self.phase = Phase.RESETTING
        self._cancel_frame()
        self.session.reset()
        self.session.latch.clear()
        if self._in_frame:
            # _run_frames picks the restart up once the current frame unwinds
            return
        self.phase = Phase.RUNNING
        self.advance_frame()

    def _frame(self):
        left, right = self.session.latch.apply()
        outcome, broken = physics.step(self.session, left, right)
        self.last_outcome = outcome
        self.last_broken = broken

        if outcome == Outcome.LOST:
            self._end_round(config.MSG_LOST)
            return
        if outcome == Outcome.WON:
            self._end_round(config.MSG_WON)
            return

        if self.render is not None:
            self.render(self.session.snapshot())
        self._request_frame()

    def _end_round(self, message):
        self.notify(message)
        if self.phase == Phase.STOPPED:
            return
        self.reset_round()

    def _request_frame(self):
        assert self._frame_request is None, "a frame is already scheduled"
        self._frame_request = self.scheduler.request(self._on_tick)

    def _cancel_frame(self):
        self.scheduler.cancel(self._frame_request)
        self._frame_request = None
