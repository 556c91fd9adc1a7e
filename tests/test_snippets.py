"""Tests for snippet segmentation and the reveal gate."""

from __future__ import annotations

import pytest

from src.snippets.reveal import RevealState, reveal, start_reveal, start_reveal_for_transcript
from src.snippets.segmenter import segment_transcript


def _reveal_n(state: RevealState, n: int) -> RevealState:
    for _ in range(n):
        state = reveal(state)
    return state


class TestSegmenter:
    def test_short_transcript_is_one_snippet(self) -> None:
        assert segment_transcript("alpha beta gamma", 280) == ["alpha beta gamma"]

    def test_empty_input_yields_nothing(self) -> None:
        assert segment_transcript("") == []
        assert segment_transcript("   \n\t  ") == []

    def test_thousand_five_char_words(self) -> None:
        text = " ".join(["hello"] * 1000)
        snippets = segment_transcript(text, 280)

        assert all(len(s) <= 280 for s in snippets)
        assert sum(len(s.split()) for s in snippets) == 1000
        # 46 words * 5 chars + 45 spaces = 275; a 47th word would make 281.
        assert len(snippets[0].split()) == 46

    def test_join_reconstructs_normalized_words(self) -> None:
        text = "  The quick\tbrown fox\n\njumps   over the lazy dog.  " * 40
        snippets = segment_transcript(text, 50)
        assert " ".join(snippets).split() == text.split()
        assert " ".join(snippets) == " ".join(text.split())

    @pytest.mark.parametrize("budget", [1, 5, 13, 280, 10_000])
    def test_snippets_respect_budget(self, budget: int) -> None:
        text = "a bb ccc dddd eeeee ffffff ggggggg " * 30
        for snippet in segment_transcript(text, budget):
            assert snippet
            assert len(snippet) <= budget or " " not in snippet

    def test_oversized_word_kept_whole(self) -> None:
        long_word = "x" * 300
        snippets = segment_transcript(f"before {long_word} after", 280)
        assert snippets == ["before", long_word, "after"]

    def test_word_exactly_at_budget(self) -> None:
        word = "y" * 280
        assert segment_transcript(f"{word} z", 280) == [word, "z"]

    def test_exact_fit_stays_in_snippet(self) -> None:
        # "abcd efgh" is 9 characters
        assert segment_transcript("abcd efgh ij", 9) == ["abcd efgh", "ij"]

    def test_non_positive_budget_rejected(self) -> None:
        with pytest.raises(ValueError):
            segment_transcript("anything", 0)

    def test_counts_code_points(self) -> None:
        # Each emoji is one code point, so four of them plus three spaces fit in 7.
        assert segment_transcript("😀 😀 😀 😀 😀", 7) == ["😀 😀 😀 😀", "😀"]


class TestRevealGate:
    def test_initial_state_shows_first_snippet(self) -> None:
        state = start_reveal(["one", "two", "three"], scroll_limit=5)
        assert state.revealed == 1
        assert state.scrolls_used == 0
        assert state.visible == ("one",)
        assert state.remaining_scrolls == 5

    def test_initial_state_without_snippets(self) -> None:
        state = start_reveal([], scroll_limit=5)
        assert state.revealed == 0
        assert state.visible == ()
        assert state.fully_revealed
        assert not state.can_reveal

    def test_reveal_spends_one_scroll(self) -> None:
        state = reveal(start_reveal(["one", "two", "three"], scroll_limit=5))
        assert state.revealed == 2
        assert state.scrolls_used == 1
        assert state.visible == ("one", "two")

    def test_limit_five_of_ten_snippets(self) -> None:
        snippets = [f"snippet {i}" for i in range(10)]
        state = _reveal_n(start_reveal(snippets, scroll_limit=5), 5)

        assert len(state.visible) == 6
        assert state.limit_reached
        assert not state.fully_revealed
        assert state.has_more

        assert _reveal_n(state, 10) == state

    def test_fully_revealed_before_limit(self) -> None:
        state = _reveal_n(start_reveal(["a", "b", "c"], scroll_limit=10), 7)
        assert state.fully_revealed
        assert not state.limit_reached
        assert state.scrolls_used == 2
        assert state.remaining_scrolls == 8

    @pytest.mark.parametrize("total", [0, 1, 2, 6, 7, 30])
    @pytest.mark.parametrize("limit", [0, 1, 5, 50])
    def test_never_exceeds_bound(self, total: int, limit: int) -> None:
        state = start_reveal([str(i) for i in range(total)], scroll_limit=limit)
        for _ in range(total + limit + 5):
            state = reveal(state)
            assert state.revealed <= min(total, 1 + limit)
            assert 0 <= state.scrolls_used <= limit
        assert state.revealed == min(total, 1 + limit)

    def test_reveal_does_not_mutate(self) -> None:
        before = start_reveal(["a", "b"], scroll_limit=5)
        after = reveal(before)
        assert before.revealed == 1
        assert after is not before

    def test_state_is_frozen(self) -> None:
        state = start_reveal(["a"], scroll_limit=5)
        with pytest.raises(AttributeError):
            state.revealed = 3  # type: ignore[misc]

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValueError):
            start_reveal(["a"], scroll_limit=-1)

    def test_progress(self) -> None:
        state = _reveal_n(start_reveal(list("abcdefghij"), scroll_limit=8), 2)
        assert state.progress == pytest.approx(0.25)
        assert start_reveal(["a"], scroll_limit=0).progress == 0.0

    def test_share_text_joins_visible(self) -> None:
        state = reveal(start_reveal(["first part", "second part", "third"], scroll_limit=5))
        assert state.share_text() == "first part\n\nsecond part"

    def test_start_from_transcript(self) -> None:
        text = " ".join(["word"] * 200)
        state = start_reveal_for_transcript(text, scroll_limit=5, char_budget=280)
        assert state.total == len(segment_transcript(text, 280))
        assert state.visible == (segment_transcript(text, 280)[0],)
