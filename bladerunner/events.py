"""
Event Dispatcher
String-keyed events used by view composers and creators
"""
from fnmatch import fnmatchcase
from typing import Any, Callable, Dict, List, Optional, Union

from bladerunner.logging import getLogger

logger = getLogger(__name__)


class Dispatcher:
    """
    Event dispatcher

    Exact listeners are called with the payload unpacked; wildcard listeners
    (names containing '*') are called with (event_name, payload).

    Example:
        events = Dispatcher()
        events.listen('composing: pages.*', lambda event, payload: ...)
        events.listen('creating: pages.home', lambda view: ...)
        events.dispatch('creating: pages.home', [view])
    """

    def __init__(self, container=None):
        self.container = container
        self.listeners: Dict[str, List[Callable]] = {}
        self.wildcards: Dict[str, List[Callable]] = {}

    def listen(self, events: Union[str, List[str]], listener: Callable):
        """Register a listener for one or many events"""
        if isinstance(events, str):
            events = [events]

        for event in events:
            if '*' in event:
                self.wildcards.setdefault(event, []).append(listener)
            else:
                self.listeners.setdefault(event, []).append(listener)

    def has_listeners(self, event_name: str) -> bool:
        if self.listeners.get(event_name):
            return True
        return any(fnmatchcase(event_name, pattern) for pattern in self.wildcards)

    def has_wildcard_listeners(self, event_name: str) -> bool:
        return any(fnmatchcase(event_name, pattern) for pattern in self.wildcards)

    def get_listeners(self, event_name: str) -> List[Callable]:
        """Exact listeners first, then matching wildcard listeners, in registration order"""
        listeners = [self._make_listener(listener) for listener in self.listeners.get(event_name, [])]

        for pattern, wildcard_listeners in self.wildcards.items():
            if fnmatchcase(event_name, pattern):
                listeners.extend(
                    self._make_listener(listener, wildcard=True) for listener in wildcard_listeners
                )

        return listeners

    def dispatch(self, event: str, payload: Any = None, halt: bool = False):
        """
        Fire an event and call its listeners

        Args:
            event: Event name
            payload: Positional arguments for listeners (a non-list is wrapped)
            halt: Stop at and return the first non-None response

        Returns:
            First non-None response when halting, otherwise the list of responses
        """
        if payload is None:
            payload = []
        elif not isinstance(payload, list):
            payload = [payload]

        listeners = self.get_listeners(event)
        if listeners:
            logger.debug("Dispatching [%s] to %d listener(s)", event, len(listeners))

        responses = []

        for listener in listeners:
            response = listener(event, payload)

            if halt and response is not None:
                return response

            # A listener returning False stops propagation
            if response is False:
                break

            responses.append(response)

        return None if halt else responses

    def until(self, event: str, payload: Any = None):
        return self.dispatch(event, payload, halt=True)

    def forget(self, event: str):
        if '*' in event:
            self.wildcards.pop(event, None)
        else:
            self.listeners.pop(event, None)

    def _make_listener(self, listener: Callable, wildcard: bool = False) -> Callable:
        if wildcard:
            return lambda event, payload: listener(event, payload)
        return lambda event, payload: listener(*payload)
