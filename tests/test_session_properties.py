"""Property-based tests for typing session invariants using Hypothesis."""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from typedrill.session import (
    SessionState,
    accept_backspace,
    accept_char,
    current_token,
    expected_char,
    start,
)

CODE_ALPHABET = 'ab_Z09 \t\n\r"\\=(){}.;é'
code_text = st.text(alphabet=CODE_ALPHABET, max_size=80)
any_text = st.text(alphabet=st.characters(exclude_categories=("Cs",)), max_size=80)
keystrokes = st.lists(st.sampled_from(list(CODE_ALPHABET) + ["<bs>"]), max_size=120)


def reconstruct(state: SessionState) -> str:
    """Tokens before cursor + typed prefix + rest of current token + tokens after."""
    before = "".join(t.text for t in state.tokens[: state.cursor_index])
    token = current_token(state)
    if token is None:
        return before + state.typed_prefix
    after = "".join(t.text for t in state.tokens[state.cursor_index + 1 :])
    return before + state.typed_prefix + token.text[len(state.typed_prefix) :] + after


def check_invariants(state: SessionState) -> None:
    assert reconstruct(state) == state.code
    token = current_token(state)
    if token is None:
        assert state.ready_for_next
        assert state.typed_prefix == ""
    else:
        assert not state.ready_for_next
        assert token.significant
        assert token.text.startswith(state.typed_prefix)
        assert len(state.typed_prefix) < len(token.text)


class TestCorrectTyping:
    @given(any_text)
    @settings(max_examples=150)
    def test_typing_expected_chars_completes(self, code: str) -> None:
        state = start(code)
        check_invariants(state)
        steps = 0
        while not state.ready_for_next:
            assert accept_char(state, expected_char(state))
            check_invariants(state)
            steps += 1
            assert steps <= len(code)
        assert "".join(t.text for t in state.tokens) == code

    @given(code_text)
    @settings(max_examples=150)
    def test_cursor_never_rests_on_whitespace(self, code: str) -> None:
        state = start(code)
        while not state.ready_for_next:
            token = current_token(state)
            assert token is not None and token.significant
            accept_char(state, expected_char(state))


class TestArbitraryKeystrokes:
    @given(code_text, keystrokes)
    @settings(max_examples=200)
    def test_invariants_hold_for_any_keystrokes(self, code: str, keys: list[str]) -> None:
        state = start(code)
        for key in keys:
            if key == "<bs>":
                accept_backspace(state)
            else:
                accept_char(state, key)
            check_invariants(state)

    @given(code_text, keystrokes)
    @settings(max_examples=200)
    def test_cursor_is_monotonic_under_accept_char(self, code: str, keys: list[str]) -> None:
        state = start(code)
        for key in keys:
            if key == "<bs>":
                continue
            before = state.cursor_index
            accept_char(state, key)
            assert state.cursor_index >= before


class TestWrongKeys:
    @given(code_text, st.lists(st.sampled_from(list(CODE_ALPHABET)), min_size=1, max_size=20))
    @settings(max_examples=200)
    def test_wrong_keys_are_idempotent(self, code: str, keys: list[str]) -> None:
        state = start(code)
        assume(not state.ready_for_next)
        expected = expected_char(state)
        wrong = [key for key in keys if key != expected]
        assume(wrong)

        before = (state.cursor_index, state.typed_prefix)
        for key in wrong:
            assert accept_char(state, key) is False
        assert (state.cursor_index, state.typed_prefix) == before


class TestBackspaceBoundedness:
    @given(st.from_regex(r"[a-z_]{2,12}", fullmatch=True), st.data())
    @settings(max_examples=100)
    def test_n_backspaces_undo_n_chars(self, word: str, data: st.DataObject) -> None:
        state = start(word)
        n = data.draw(st.integers(min_value=0, max_value=len(word) - 1))
        for char in word[:n]:
            assert accept_char(state, char)

        for _ in range(n):
            assert accept_backspace(state)

        assert state.typed_prefix == ""
        assert state.cursor_index == 0
        assert accept_backspace(state) is False
        assert state.cursor_index == 0
