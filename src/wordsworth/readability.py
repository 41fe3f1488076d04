from __future__ import annotations

from .models import ReadabilityResult
from .textutils import (
    count_sentences,
    count_syllables,
    count_words,
    round_half_up,
    strip_markdown,
)

READING_WPM = 238
COMPLEX_WORD_SYLLABLES = 3


def analyze_readability(text: str) -> ReadabilityResult:
    """Compute Flesch reading ease, Gunning Fog, grade level and reading time."""
    words = strip_markdown(text).split()
    word_count = count_words(text)
    sentence_count = count_sentences(text)

    if word_count == 0:
        return ReadabilityResult(
            flesch_kincaid=0.0,
            gunning_fog=0.0,
            grade_level=0.0,
            word_count=0,
            sentence_count=sentence_count,
            reading_time_minutes=0.0,
        )

    syllables = [count_syllables(word) for word in words]
    avg_words_per_sentence = word_count / sentence_count
    avg_syllables_per_word = sum(syllables) / word_count

    flesch = 206.835 - 1.015 * avg_words_per_sentence - 84.6 * avg_syllables_per_word

    complex_words = sum(1 for count in syllables if count >= COMPLEX_WORD_SYLLABLES)
    fog = 0.4 * (avg_words_per_sentence + 100 * (complex_words / word_count))

    grade = 0.39 * avg_words_per_sentence + 11.8 * avg_syllables_per_word - 15.59

    return ReadabilityResult(
        flesch_kincaid=round_half_up(flesch, 1),
        gunning_fog=round_half_up(fog, 1),
        grade_level=max(0.0, round_half_up(grade, 1)),
        word_count=word_count,
        sentence_count=sentence_count,
        reading_time_minutes=round_half_up(word_count / READING_WPM, 2),
    )
