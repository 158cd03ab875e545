"""Value subscriptions on top of Realtime Database listeners."""

import copy
import logging
from typing import Any, Callable

from foodcourt.config import FirebaseConfig
from foodcourt.firebase.client import get_reference

logger = logging.getLogger(__name__)

Unsubscribe = Callable[[], None]


class SnapshotMirror:
    """
    Local copy of a subscribed subtree.

    ``Reference.listen`` delivers ``put`` and ``patch`` events relative to the
    listened path; applying them here lets subscribers always receive the
    full current value instead of deltas.
    """

    def __init__(self):
        self.value: Any = None

    def apply(self, event_type: str, path: str, data: Any) -> Any:
        parts = [part for part in (path or "/").split("/") if part]
        if event_type == "put":
            self.value = self._set(self.value, parts, copy.deepcopy(data))
        elif event_type == "patch":
            for key, child in (data or {}).items():
                child_parts = parts + [part for part in str(key).split("/") if part]
                self.value = self._set(self.value, child_parts, copy.deepcopy(child))
        else:
            logger.debug("Ignoring %s event at %s", event_type, path)
        return self.value

    @classmethod
    def _set(cls, node: Any, parts: list[str], data: Any) -> Any:
        if not parts:
            return data
        if isinstance(node, list):
            node = {str(index): child for index, child in enumerate(node) if child is not None}
        elif not isinstance(node, dict):
            if data is None:
                return node
            node = {}

        head, rest = parts[0], parts[1:]
        child = cls._set(node.get(head), rest, data)
        if child is None or child == {}:
            node.pop(head, None)
        else:
            node[head] = child
        return node or None


def subscribe(
    config: FirebaseConfig,
    path: str,
    callback: Callable[[Any], None],
) -> Unsubscribe:
    """
    Call ``callback`` with the full value at ``path`` on every change.

    Returns a handle that stops the underlying listener; the caller owns it.
    """
    mirror = SnapshotMirror()

    def on_event(event):
        try:
            value = mirror.apply(event.event_type, event.path, event.data)
            callback(copy.deepcopy(value))
        except Exception:
            logger.exception("Handling %s event on %s failed", event.event_type, path)

    registration = get_reference(config, path).listen(on_event)
    logger.debug("Subscribed to %s", path)
    return registration.close
