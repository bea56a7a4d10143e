from categorizer.rules import DEFAULT_TABLE, classify, classify_with_rule
from exc_utils.categories import DEFAULT_RULES


def test_keyword_categories():
    assert classify("STARBUCKS #1234 TORONTO") == "Meals & Entertainment"
    assert classify("UBER *TRIP HELP.UBER.COM") == "Travel"
    assert classify("STAPLES #42") == "Office Supplies"
    assert classify("HOME DEPOT 7001") == "Equipment"
    assert classify("ADOBE CREATIVE CLOUD") == "Software & Subscriptions"
    assert classify("MONTHLY FEE") == "Bank Fees"


def test_earlier_category_wins():
    # "coffee" (Meals) and "airport" (Travel) both match; Meals is declared first.
    assert classify("coffee shop at the airport") == "Meals & Entertainment"


def test_declared_trigger_order_shadows_later_rules():
    # "google" belongs to Software, which precedes Marketing's "google ads".
    assert classify("GOOGLE ADS 123") == "Software & Subscriptions"


def test_no_match_is_uncategorized():
    assert classify("") == "Uncategorized"
    assert classify(None) == "Uncategorized"
    assert classify("zzz-no-match-zzz") == "Uncategorized"


def test_rule_name_reported():
    assert classify_with_rule("Shell gas station") == ("Travel", "travel")
    assert classify_with_rule("zzz-no-match-zzz") == ("Uncategorized", None)


def test_default_table_keeps_declaration_order():
    assert DEFAULT_TABLE.categories() == [cat for cat, _ in DEFAULT_RULES]
    assert DEFAULT_TABLE.rules[0].name == "meals_entertainment"
