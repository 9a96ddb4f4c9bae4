"""Conversation handle passed to the navigator on every call."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from sendero.core.interfaces import IStateStore
from sendero.state.store import DictStateStore


@dataclass
class Conversation:
    """Per-turn view of a conversation.

    Attributes:
        state: Store persisting the navigator position across turns
        data: Accumulated conversation facts used by scenario conditions
    """

    state: IStateStore = field(default_factory=DictStateStore)
    data: Mapping[str, Any] | None = field(default_factory=dict)
