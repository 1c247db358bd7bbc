import pytest
from werkzeug.exceptions import BadRequest

from card_advisor.services.catalog import CardCatalog


def _new_card(**overrides):
    payload = {
        "name": "Test Rewards",
        "issuer": "Test Bank",
        "joiningFee": "100",
        "annualFee": 250,
        "rewardType": "Cashback",
        "rewardRate": "1% on everything",
        "eligibilityCriteria": "Monthly income ₹10,000+",
        "specialPerks": ["Perk one", "Perk two"],
        "cardType": "Cashback",
        "minCreditScore": 600,
        "minIncome": "10000",
    }
    payload.update(overrides)
    return payload


def test_seed_is_idempotent(database):
    catalog = CardCatalog(database)
    assert catalog.seed_reference_cards() == 25
    assert catalog.seed_reference_cards() == 0
    assert database["credit_cards"].count_documents({}) == 25


def test_seed_assigns_sequential_integer_ids(catalog):
    first = catalog.get_card(1)
    assert first["name"] == "HDFC Regalia"
    assert first["annualFee"] == "2500.00"
    assert first["minIncome"] == "25000.00"
    assert first["minCreditScore"] == 750
    assert first["specialPerks"] == ["Airport Lounge Access", "Travel Insurance", "Dining Privileges"]
    assert first["isActive"] is True
    assert first["createdAt"].endswith("Z")
    assert catalog.get_card(25)["name"] == "Union Bank of India Platinum"
    assert catalog.get_card(26) is None


def test_default_order_is_newest_first_and_pages_are_contiguous(catalog):
    page_one, total = catalog.list_cards(offset=0, limit=12)
    page_two, _ = catalog.list_cards(offset=12, limit=12)
    page_three, _ = catalog.list_cards(offset=24, limit=12)

    assert total == 25
    assert [card["id"] for card in page_one] == list(range(25, 13, -1))
    assert [card["id"] for card in page_two] == list(range(13, 1, -1))
    assert [card["id"] for card in page_three] == [1]


def test_lowest_annual_fee_second_page(catalog):
    cards, total = catalog.list_cards(offset=12, limit=12, sort_by="Lowest Annual Fee")
    assert total == 25
    assert [card["id"] for card in cards] == [20, 15, 19, 1, 18, 6, 11, 22, 17, 8, 10, 7]


def test_annual_fee_sort_is_numeric(catalog):
    cards, _ = catalog.list_cards(offset=0, limit=25, sort_by="annual_fee")
    fees = [float(card["annualFee"]) for card in cards]
    assert fees == sorted(fees)
    assert cards[-1]["name"] == "Axis Magnus"


def test_highest_cashback_sorts_reward_rate_descending(catalog):
    cards, _ = catalog.list_cards(offset=0, limit=25, sort_by="Highest Cashback")
    rates = [card["rewardRate"] for card in cards]
    assert rates == sorted(rates, reverse=True)
    assert cards[0]["name"] == "IDFC FIRST Wealth"


def test_search_matches_name_or_issuer_case_insensitively(catalog):
    cards, total = catalog.list_cards(offset=0, limit=12, search="hdfc")
    assert total == 3
    assert {card["name"] for card in cards} == {"HDFC Regalia", "HDFC Millennia", "HDFC MoneyBack"}

    _, total = catalog.list_cards(offset=0, limit=12, search="american")
    assert total == 1


def test_search_treats_regex_characters_literally(catalog):
    _, total = catalog.list_cards(offset=0, limit=12, search="(.*")
    assert total == 0


def test_filters_are_exact_and_total_counts_filtered_set(catalog):
    cards, total = catalog.list_cards(offset=0, limit=5, card_type="Travel")
    assert total == 9
    assert len(cards) == 5
    assert all(card["cardType"] == "Travel" for card in cards)

    cards, total = catalog.list_cards(offset=0, limit=12, issuer="ICICI Bank")
    assert total == 3
    assert {card["id"] for card in cards} == {2, 10, 14}

    _, total = catalog.list_cards(offset=0, limit=12, issuer="ICICI")
    assert total == 0


def test_placeholder_filters_mean_no_filter(catalog):
    _, total = catalog.list_cards(offset=0, limit=12, issuer="All Issuers", card_type="All Types")
    assert total == 25


def test_inactive_cards_are_hidden(catalog, database):
    database["credit_cards"].update_one({"_id": 2}, {"$set": {"is_active": False}})
    _, total = catalog.list_cards(offset=0, limit=12)
    assert total == 24
    assert 2 not in [card["id"] for card in catalog.list_active()]
    assert catalog.get_card(2)["isActive"] is False


def test_create_card_allocates_next_id(catalog):
    card = catalog.create_card(_new_card())
    assert card["id"] == 26
    assert card["annualFee"] == "250.00"
    assert card["joiningFee"] == "100.00"
    assert card["minIncome"] == "10000.00"
    assert card["affiliateLink"] is None
    assert catalog.get_card(26)["name"] == "Test Rewards"


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"issuer": None},
        {"annualFee": "free"},
        {"annualFee": None},
        {"minIncome": "-1"},
        {"minCreditScore": -5},
        {"minCreditScore": "high"},
        {"specialPerks": "lounge"},
    ],
)
def test_create_card_rejects_invalid_payloads(database, overrides):
    with pytest.raises(BadRequest):
        CardCatalog(database).create_card(_new_card(**overrides))
    assert database["credit_cards"].count_documents({}) == 0
