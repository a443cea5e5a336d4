"""
Unit tests for Session and SessionStore.
"""

import asyncio

import pytest
from pydantic import ValidationError

from chat_relay.core import SessionStore
from chat_relay.models import Role, SeedState, Session, TurnStatus


class TestSession:
    """Tests for the Session model."""

    def test_new_session_is_empty_and_unseeded(self):
        session = Session(id=1)
        assert session.messages == []
        assert session.seed_state == SeedState.UNINITIALIZED

    def test_seed_inserts_pair_once(self):
        session = Session(id=1)
        assert session.seed("prompt", "context") is True
        assert session.seed("prompt", "other context") is False
        assert session.transcript() == [
            {"role": "system", "content": "prompt"},
            {"role": "system", "content": "context"},
        ]

    def test_seed_state_survives_cleared_messages(self):
        session = Session(id=1)
        session.seed("prompt", "context")
        session.messages.clear()
        assert session.seed("prompt", "context") is False
        assert session.messages == []

    def test_answered_turn(self):
        session = Session(id=1)
        turn = session.begin_turn("hello")
        assert session.turn_status[turn] == TurnStatus.PENDING
        session.answer_turn(turn, "hi there")
        assert session.turn_status[turn] == TurnStatus.ANSWERED
        assert [m.role for m in session.messages] == ["user", "assistant"]

    def test_failed_turn_keeps_user_message(self):
        session = Session(id=1)
        turn = session.begin_turn("hello")
        session.fail_turn(turn)
        assert session.turn_status[turn] == TurnStatus.FAILED
        assert session.transcript() == [{"role": "user", "content": "hello"}]

    def test_messages_are_frozen(self):
        session = Session(id=1)
        session.append(Role.USER, "hello")
        with pytest.raises(ValidationError):
            session.messages[0].content = "changed"


class TestSessionStore:
    """Tests for the in-memory registry."""

    def test_get_or_create_creates_once(self):
        store = SessionStore()
        first = store.get_or_create(7)
        second = store.get_or_create(7)
        assert first is second
        assert len(store) == 1
        assert 7 in store

    def test_mutations_visible_to_later_lookups(self):
        store = SessionStore()
        store.get_or_create(7).begin_turn("hello")
        assert store.get(7).messages[0].content == "hello"

    def test_get_unknown_returns_none(self):
        store = SessionStore()
        assert store.get(3) is None
        assert 3 not in store

    def test_distinct_ids_distinct_sessions(self):
        store = SessionStore()
        assert store.get_or_create(1) is not store.get_or_create(2)
        assert len(store) == 2

    def test_lock_is_per_session_and_does_not_create(self):
        store = SessionStore()
        assert store.lock(1) is store.lock(1)
        assert store.lock(1) is not store.lock(2)
        assert len(store) == 0

    def test_clear(self):
        store = SessionStore()
        store.get_or_create(1)
        store.clear()
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_lock_serializes_same_session(self):
        store = SessionStore()
        order = []

        async def worker(name):
            async with store.lock(5):
                order.append(f"{name}-in")
                await asyncio.sleep(0.01)
                order.append(f"{name}-out")

        await asyncio.gather(worker("a"), worker("b"))
        assert order == ["a-in", "a-out", "b-in", "b-out"]
