from typing import Any, Optional, Union

from berry.needle import SemanticPointer, needle
from .protocols import Renderer

MessageId = Union[str, SemanticPointer]


class MessageBus:
    """
    Routes diagnostics to whichever renderer the composition root attached.

    Without a renderer every call is a no-op, so library code can report
    freely when embedded.
    """

    def __init__(self):
        self._renderer: Optional[Renderer] = None

    def set_renderer(self, renderer: Optional[Renderer]):
        self._renderer = renderer

    def resolve(self, msg_id: MessageId, **kwargs: Any) -> str:
        template = needle.get(msg_id)
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError):
            return f"<formatting_error for '{msg_id}'>"

    def _render(self, level: str, msg_id: MessageId, **kwargs: Any) -> None:
        if self._renderer is not None:
            self._renderer.render(self.resolve(msg_id, **kwargs), level)

    def debug(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("debug", msg_id, **kwargs)

    def info(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("info", msg_id, **kwargs)

    def success(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("success", msg_id, **kwargs)

    def warning(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("warning", msg_id, **kwargs)

    def error(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("error", msg_id, **kwargs)


# Global singleton instance
bus = MessageBus()
