from certumctl.core.base.agent import Agent
from certumctl.core.base.message import Message, Result
from certumctl.core.base.process import CommandResult
from certumctl.core.base.terminal import Terminal

__all__ = ["Agent", "CommandResult", "Message", "Result", "Terminal"]
