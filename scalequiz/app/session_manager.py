from __future__ import annotations

"""Session Manager: drives pages on a screen until the user quits.

The loop is screen-agnostic: anything with `render(text)` and `read_key()`
will do, which is how tests run it without a terminal.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .explain import trace as xtrace
from .pages import Destroy, MainMenu, Noop, Page, PageContext, Render, handle

logger = logging.getLogger(__name__)


class Screen(Protocol):
    def render(self, text: str) -> None: ...

    def read_key(self) -> str: ...


@dataclass
class RuntimeState:
    keys_handled: int = 0
    transitions: int = 0


class SessionManager:
    def __init__(self, context: Optional[PageContext] = None, start: Optional[Page] = None) -> None:
        self.context = context or PageContext()
        self.current: Page = start or MainMenu()
        self.state = RuntimeState()

    def step(self, key: str) -> bool:
        """Apply one key to the current page. Returns False once the user quits."""
        action = handle(self.current, key, self.context)
        self.state.keys_handled += 1
        if isinstance(action, Destroy):
            xtrace("destroy", {"page": type(self.current).__name__})
            return False
        if isinstance(action, Render):
            xtrace("transition", {"from": type(self.current).__name__, "to": type(action.page).__name__, "key": key})
            self.current = action.page
            self.state.transitions += 1
        elif not isinstance(action, Noop):
            raise TypeError(f"Unknown action: {action!r}")
        return True

    def run(self, screen: Screen) -> RuntimeState:
        """Render, read one key, dispatch; repeat until a Destroy action."""
        logger.debug("Session started on %s", type(self.current).__name__)
        while True:
            screen.render(self.current.text)
            if not self.step(screen.read_key()):
                break
        logger.debug("Session ended after %d keys", self.state.keys_handled)
        return self.state
