"""Conversation state handling."""

from sendero.state.conversation import Conversation
from sendero.state.store import DictStateStore, InMemoryStateStore

__all__ = ["Conversation", "DictStateStore", "InMemoryStateStore"]
