"""
Unit tests for the individual suffix-stripping steps.

Every rule is checked on the step that owns it, with the classic rule vectors
from Porter's paper.
"""

import pytest

from src.stemmer.rules import (
    step1_plurals_and_participles,
    step2_terminal_y,
    step3_double_suffixes,
    step4_suffixes,
    step5_context_suffixes,
    step6_final_e,
    step7_verb_suffixes,
)


class TestStep1PluralsAndParticiples:
    """Plurals, -eed, -ed and -ing"""

    @pytest.mark.parametrize("word,expected", [
        ("caresses", "caress"),
        ("ponies", "poni"),
        ("ties", "ti"),
        ("caress", "caress"),
        ("cats", "cat"),
    ])
    def test_plurals(self, word, expected):
        assert step1_plurals_and_participles(word) == expected

    @pytest.mark.parametrize("word,expected", [
        ("feed", "feed"),
        ("agreed", "agree"),
        ("plastered", "plaster"),
        ("motoring", "motor"),
        ("sing", "sing"),
    ])
    def test_participles(self, word, expected):
        assert step1_plurals_and_participles(word) == expected

    @pytest.mark.parametrize("word,expected", [
        ("conflated", "conflate"),
        ("troubled", "trouble"),
        ("sized", "size"),
    ])
    def test_restores_e_after_at_bl_iz(self, word, expected):
        assert step1_plurals_and_participles(word) == expected

    @pytest.mark.parametrize("word,expected", [
        ("hopping", "hop"),
        ("tanned", "tan"),
        ("falling", "fall"),
        ("hissing", "hiss"),
        ("fizzed", "fizz"),
    ])
    def test_undoubles_except_l_s_z(self, word, expected):
        assert step1_plurals_and_participles(word) == expected

    @pytest.mark.parametrize("word,expected", [
        ("failing", "fail"),
        ("filing", "file"),
    ])
    def test_restores_e_on_short_cvc_stems(self, word, expected):
        assert step1_plurals_and_participles(word) == expected

    def test_eed_with_zero_measure_blocks_ed_rule(self):
        """'eed' is matched first; m == 0 leaves the word alone"""
        assert step1_plurals_and_participles("feeds") == "feed"

    def test_agree_is_fixed_point(self):
        assert step1_plurals_and_participles("agree") == "agree"


class TestStep2TerminalY:

    def test_y_to_i_when_stem_has_vowel(self):
        assert step2_terminal_y("happy") == "happi"

    def test_y_kept_without_vowel(self):
        assert step2_terminal_y("sky") == "sky"


class TestStep3DoubleSuffixes:
    """Double suffix to single suffix mapping, gated on m > 0"""

    @pytest.mark.parametrize("word,expected", [
        ("relational", "relate"),
        ("conditional", "condition"),
        ("rational", "rational"),
        ("valenci", "valence"),
        ("hesitanci", "hesitance"),
        ("digitizer", "digitize"),
        ("conformabli", "conformable"),
        ("radicalli", "radical"),
        ("differentli", "different"),
        ("vileli", "vile"),
        ("analogousli", "analogous"),
        ("vietnamization", "vietnamize"),
        ("predication", "predicate"),
        ("operator", "operate"),
        ("feudalism", "feudal"),
        ("decisiveness", "decisive"),
        ("hopefulness", "hopeful"),
        ("callousness", "callous"),
        ("formaliti", "formal"),
        ("sensitiviti", "sensitive"),
        ("sensibiliti", "sensible"),
    ])
    def test_rule_vectors(self, word, expected):
        assert step3_double_suffixes(word) == expected

    def test_single_letter_is_untouched(self):
        assert step3_double_suffixes("a") == "a"


class TestStep4Suffixes:

    @pytest.mark.parametrize("word,expected", [
        ("triplicate", "triplic"),
        ("formative", "form"),
        ("formalize", "formal"),
        ("electriciti", "electric"),
        ("electrical", "electric"),
        ("hopeful", "hope"),
        ("goodness", "good"),
    ])
    def test_rule_vectors(self, word, expected):
        assert step4_suffixes(word) == expected


class TestStep5ContextSuffixes:
    """Suffix removal when the remaining stem has m > 1"""

    @pytest.mark.parametrize("word,expected", [
        ("revival", "reviv"),
        ("airliner", "airlin"),
        ("adjustable", "adjust"),
        ("replacement", "replac"),
        ("adoption", "adopt"),
    ])
    def test_removes_suffix(self, word, expected):
        assert step5_context_suffixes(word) == expected

    def test_ion_needs_s_or_t_before_it(self):
        assert step5_context_suffixes("communion") == "communion"

    def test_first_match_wins_even_if_measure_too_small(self):
        """'ement' matches with m('c') == 0 - 'ment' is never tried"""
        assert step5_context_suffixes("cement") == "cement"

    def test_short_measure_keeps_suffix(self):
        assert step5_context_suffixes("plaster") == "plaster"

    def test_single_letter_is_untouched(self):
        assert step5_context_suffixes("s") == "s"


class TestStep6FinalE:

    def test_drops_e_when_measure_above_one(self):
        assert step6_final_e("probate") == "probat"

    def test_keeps_e_after_short_cvc_stem(self):
        assert step6_final_e("rate") == "rate"

    def test_drops_e_when_not_cvc(self):
        assert step6_final_e("cease") == "ceas"

    def test_undoubles_ll(self):
        assert step6_final_e("controll") == "control"
        assert step6_final_e("roll") == "roll"


class TestStep7VerbSuffixes:
    """Residual verb-suffix pass - first applicable rule wins"""

    @pytest.mark.parametrize("word,expected", [
        ("walking", "walke"),
        ("jumped", "jump"),
        ("horses", "horse"),
        ("cares", "care"),
        ("caress", "cares"),
        ("relational", "relate"),
        ("rational", "rational"),
        ("conditional", "condition"),
        ("sing", "s"),
        ("ing", ""),
    ])
    def test_rule_vectors(self, word, expected):
        assert step7_verb_suffixes(word) == expected

    def test_no_rule_applies(self):
        assert step7_verb_suffixes("trees") == "trees"
        assert step7_verb_suffixes("cat") == "cat"
