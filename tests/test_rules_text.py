import pytest

from loa_format.models import Rule
from loa_format.rules_text import combine_protection_text, combine_rule_text, combine_rules
from loa_format.utils import UnsupportedMergeError


def test_two_protection_clauses_merge():
    combined = combine_rule_text(["Protection from black.", "Protection from white."])

    assert combined == "Protection from black and white."


def test_three_protection_clauses_merge():
    combined = combine_rule_text(
        ["Protection from red", "Protection from blue", "Protection from green"]
    )

    assert combined == "Protection from red, blue and green"


def test_four_protection_clauses_are_rejected():
    with pytest.raises(UnsupportedMergeError):
        combine_rule_text(["Protection from %s" % c for c in ("white", "blue", "black", "red")])


def test_single_protection_clause_passes_through():
    assert combine_protection_text(["Flying", "Protection from Goblins", "Trample"]) == [
        "Flying",
        "Protection from Goblins",
        "Trample",
    ]


def test_fragments_are_joined_and_recapitalized():
    assert combine_rule_text(["Flying", None, "Vigilance"]) == "Flying, vigilance"
    assert combine_rule_text([None, None]) is None


def test_protection_run_between_other_text():
    combined = combine_rule_text(
        ["Flying", "Protection from black", "Protection from white", "Haste"]
    )

    assert combined == "Flying, protection from black and white, haste"


def test_combine_rules_merges_runs_with_the_same_number():
    rules = [
        Rule(number="1", text="Protection from black", reminder=None),
        Rule(number="1", text="Protection from white", reminder=None),
        Rule(number="2", text="Flanking", reminder="Whenever a creature without flanking blocks"),
        Rule(number="3", text="Trample"),
    ]

    combined = combine_rules(rules)

    assert [rule.text for rule in combined] == [
        "Protection from black and white",
        "Flanking",
        "Trample",
    ]
    assert combined[0].reminder is None
    assert combined[1] is rules[2]


def test_combine_rules_merges_reminders_independently():
    rules = [
        Rule(number="4", text="Bushido 1", reminder="Whenever this blocks, it gets +1/+1"),
        Rule(number="4", text="Bushido 2", reminder=None),
    ]

    (combined,) = combine_rules(rules)

    assert combined.text == "Bushido 1, bushido 2"
    assert combined.reminder == "Whenever this blocks, it gets +1/+1"


def test_rules_without_number_are_not_merged():
    rules = [Rule(text="Draw a card."), Rule(text="Discard a card.")]

    assert combine_rules(rules) == rules


def test_same_number_only_merges_consecutive_rules():
    rules = [Rule(number="1", text="Flying"), Rule(number="2", text="Haste"), Rule(number="1", text="Reach")]

    assert [rule.text for rule in combine_rules(rules)] == ["Flying", "Haste", "Reach"]
