"""Tests for the inline edit session."""
from kanban_board.edit import EditSession


def _text(state, card_id):
    col, idx = state.find_card(card_id)
    return col.cards[idx].text


class TestEditSession:

    def test_begin_seeds_current_text(self, state):
        session = EditSession(state)
        assert session.begin("c1") == "text c1"
        assert session.is_active
        assert session.card_id == "c1"

    def test_commit_writes_trimmed_value(self, state, store):
        session = EditSession(state)
        session.begin("c1")
        assert session.commit("  new text ")
        assert _text(state, "c1") == "new text"
        assert not session.is_active
        assert store.writes == 1

    def test_blur_commits(self, state):
        session = EditSession(state)
        session.begin("c2")
        assert session.blur("from blur")
        assert _text(state, "c2") == "from blur"
        assert not session.is_active

    def test_cancel_discards(self, state, store):
        session = EditSession(state)
        session.begin("c1")
        session.cancel()
        assert not session.is_active
        assert _text(state, "c1") == "text c1"
        assert store.writes == 0

    def test_blank_or_unchanged_commit_keeps_text(self, state, store):
        session = EditSession(state)
        session.begin("c1")
        assert not session.commit("   ")
        session.begin("c1")
        assert not session.commit("text c1")
        assert _text(state, "c1") == "text c1"
        assert store.writes == 0
        assert not session.is_active

    def test_one_session_at_a_time(self, state):
        session = EditSession(state)
        session.begin("c1")
        assert session.begin("c2") is None
        assert session.card_id == "c1"

    def test_begin_unknown_card_ignored(self, state):
        session = EditSession(state)
        assert session.begin("ghost") is None
        assert not session.is_active

    def test_commit_without_session_is_noop(self, state, store):
        assert not EditSession(state).commit("anything")
        assert store.writes == 0
