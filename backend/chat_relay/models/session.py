"""
Session Models - Defines in-memory chat session state.
"""

from enum import Enum
from typing import Dict, List
from pydantic import BaseModel, Field

from .chat import ChatMessage, Role


class SeedState(str, Enum):
    """Whether the system prompt and context have been inserted."""
    UNINITIALIZED = "uninitialized"
    SEEDED = "seeded"


class TurnStatus(str, Enum):
    """Outcome of a user turn."""
    PENDING = "pending"
    ANSWERED = "answered"
    FAILED = "failed"


class Session(BaseModel):
    """Conversation state for one caller-supplied session id."""
    id: int
    messages: List[ChatMessage] = Field(default_factory=list)
    seed_state: SeedState = SeedState.UNINITIALIZED
    # transcript index of each user message -> its outcome
    turn_status: Dict[int, TurnStatus] = Field(default_factory=dict)

    @property
    def is_seeded(self) -> bool:
        return self.seed_state == SeedState.SEEDED

    def append(self, role: Role, content: str) -> int:
        """Append a message and return its transcript index."""
        self.messages.append(ChatMessage(role=role, content=content))
        return len(self.messages) - 1

    def seed(self, system_prompt: str, context: str) -> bool:
        """
        Insert the system prompt and context pair if not already done.

        Returns:
            bool: True if the pair was inserted by this call
        """
        if self.is_seeded:
            return False
        self.append(Role.SYSTEM, system_prompt)
        self.append(Role.SYSTEM, context)
        self.seed_state = SeedState.SEEDED
        return True

    def begin_turn(self, user_message: str) -> int:
        """Append a user message and mark it pending."""
        index = self.append(Role.USER, user_message)
        self.turn_status[index] = TurnStatus.PENDING
        return index

    def answer_turn(self, index: int, reply: str) -> None:
        self.append(Role.ASSISTANT, reply)
        self.turn_status[index] = TurnStatus.ANSWERED

    def fail_turn(self, index: int) -> None:
        # the user message stays in the transcript
        self.turn_status[index] = TurnStatus.FAILED

    def transcript(self) -> List[dict]:
        """Wire form of the messages: role and content only."""
        return [m.model_dump() for m in self.messages]
