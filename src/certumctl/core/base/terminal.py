from __future__ import annotations

import logging
from typing import Callable

from certumctl.core.base.agent import Agent
from certumctl.core.base.message import Message, Result

lg = logging.getLogger(__name__)

Handler = Callable[["Terminal", Message], Result]


def handles(message_cls: type[Message]) -> Callable[[Handler], Handler]:
    """Mark a terminal method as the handler for message_cls."""

    def mark(method: Handler) -> Handler:
        method.handled_message = message_cls
        return method

    return mark


class Terminal:
    """Maps app-layer messages onto utility invocations through an Agent.

    Commands call send() with a Message and get back that message's
    Result. Handlers are the methods marked with @handles; a subclass
    inherits its parents' handlers and may replace them.
    """

    handlers: dict[type[Message], Handler] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        found = {
            attr.handled_message: attr
            for attr in vars(cls).values()
            if hasattr(attr, "handled_message")
        }
        cls.handlers = {**cls.handlers, **found}

    def __init__(self, agent: Agent) -> None:
        self._agent = agent

    def send(self, message: Message) -> Result:
        handler = self.handlers.get(type(message))
        if handler is None:
            raise ValueError(f"no handler for {type(message).__name__}")
        result = handler(self, message)
        lg.debug("%s on %s -> %s", message.operation, self._agent.module.name, type(result).__name__)
        return result
