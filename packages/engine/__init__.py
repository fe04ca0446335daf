from .models import Word, LetterCombination, Honeycomb, ScoreResult, word_points, usable_alphabet
from .matrix import LetterMatrix, letter_mask, mask_letters
from .pangrams import enumerate_combinations, all_combinations, pangrams_for
from .scoring import score_combination, score_honeycombs, score_reference
from .ranking import best, worst, top_k, bottom_k

__all__ = [
    "Word", "LetterCombination", "Honeycomb", "ScoreResult", "word_points", "usable_alphabet",
    "LetterMatrix", "letter_mask", "mask_letters",
    "enumerate_combinations", "all_combinations", "pangrams_for",
    "score_combination", "score_honeycombs", "score_reference",
    "best", "worst", "top_k", "bottom_k",
]
