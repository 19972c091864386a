# orbitcam/input/panda_bridge.py

from typing import Optional, Tuple

from orbitcam.camera.camera_controller import CameraController
from orbitcam.core.logging import get_logger
from orbitcam.input.events import (
    Key,
    MouseButton,
    MouseRelativeEvent,
    MouseScrollEvent,
    PressEvent,
    ReleaseEvent,
    button_from_name,
)

logger = get_logger()

WHEEL_EVENTS = {
    'wheel_up': -1.0,
    'wheel_down': 1.0,
}


class PandaInputBridge:
    """
    Feeds Panda3D input into a camera controller.
    Translates event names ("mouse1", "lshift-up", "wheel_up") and mouse
    watcher positions into orbitcam events. The owner keeps running the
    Panda3D loop and calls poll() once per frame.
    """

    def __init__(self, controller: CameraController):
        self.controller = controller
        self._last_mouse_pos: Optional[Tuple[float, float]] = None

    def translate(self, event_name: str):
        """Turn a Panda3D event name into an event, or None if it is not ours."""
        if event_name in WHEEL_EVENTS:
            return MouseScrollEvent(0.0, WHEEL_EVENTS[event_name])

        released = event_name.endswith('-up')
        name = event_name[:-len('-up')] if released else event_name

        button = button_from_name(name)
        if button is None:
            return None
        return ReleaseEvent(button) if released else PressEvent(button)

    def handle(self, event_name: str):
        """Translate and forward one event. Returns the forwarded event."""
        e = self.translate(event_name)
        if e is None:
            logger.debug(f"Ignoring Panda3D event '{event_name}'")
            return None
        self.controller.event(e)
        return e

    def listen(self, base):
        """Register handle() with a ShowBase for every known event name."""
        from panda3d.core import ModifierButtons

        # Plain "mouse1" events even while a modifier is held
        base.mouseWatcherNode.setModifierButtons(ModifierButtons())
        base.buttonThrowers[0].node().setModifierButtons(ModifierButtons())

        names = [b.value for b in MouseButton] + [k.value for k in Key]
        for name in names:
            base.accept(name, self.handle, [name])
            base.accept(name + '-up', self.handle, [name + '-up'])
        for name in WHEEL_EVENTS:
            base.accept(name, self.handle, [name])

        logger.info(f"Listening to {len(names) * 2 + len(WHEEL_EVENTS)} Panda3D events")

    def poll(self, base):
        """
        Forward pointer motion since the previous poll as relative motion.
        Mouse watcher coordinates are normalized (-1..1, y up); deltas are
        converted to window pixels with y pointing down.
        """
        watcher = base.mouseWatcherNode
        if not watcher or not watcher.hasMouse():
            self._last_mouse_pos = None
            return None

        mpos = watcher.getMouse()
        pos = (mpos.getX(), mpos.getY())
        last = self._last_mouse_pos
        self._last_mouse_pos = pos
        if last is None:
            return None

        w = base.win.getXSize()
        h = base.win.getYSize()
        dx = (pos[0] - last[0]) * w / 2.0
        dy = -(pos[1] - last[1]) * h / 2.0
        if dx == 0.0 and dy == 0.0:
            return None

        e = MouseRelativeEvent(dx, dy)
        self.controller.event(e)
        return e
