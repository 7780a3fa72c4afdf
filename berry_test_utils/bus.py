from contextlib import contextmanager
from typing import List, Dict, Any, Optional, Union

import berry.common
from berry.common.messaging.protocols import Renderer
from berry.needle import SemanticPointer


class SpyRenderer(Renderer):
    def __init__(self):
        self.messages: List[Dict[str, Any]] = []

    def render(self, message: str, level: str) -> None:
        pass

    def record(self, level: str, msg_id: SemanticPointer, params: Dict[str, Any]):
        self.messages.append({"level": level, "id": str(msg_id), "params": params})


class SpyBus:
    """
    Spies on the global ``berry.common.bus`` singleton.

    The instance methods are patched in place, so modules that already
    did ``from berry.common import bus`` are observed as well.
    """

    def __init__(self):
        self._spy_renderer = SpyRenderer()

    @contextmanager
    def patch(self, monkeypatch: Any):
        real_bus = berry.common.bus

        def intercept_render(
            level: str, msg_id: Union[str, SemanticPointer], **kwargs: Any
        ) -> None:
            if isinstance(msg_id, SemanticPointer):
                self._spy_renderer.record(level, msg_id, kwargs)

        monkeypatch.setattr(real_bus, "_render", intercept_render)
        monkeypatch.setattr(real_bus, "_renderer", self._spy_renderer)

        yield self

    def get_messages(self) -> List[Dict[str, Any]]:
        return self._spy_renderer.messages

    def get_ids(self, level: Optional[str] = None) -> List[str]:
        return [
            m["id"]
            for m in self.get_messages()
            if level is None or m["level"] == level
        ]

    def assert_id_called(self, msg_id: SemanticPointer, level: Optional[str] = None):
        key = str(msg_id)
        if key not in self.get_ids(level):
            ids_seen = self.get_ids()
            raise AssertionError(
                f"Message with ID '{key}' was not sent.\nCaptured IDs: {ids_seen}"
            )

    def assert_id_not_called(self, msg_id: SemanticPointer):
        key = str(msg_id)
        if key in self.get_ids():
            raise AssertionError(f"Message with ID '{key}' was sent unexpectedly.")
