from decimal import Decimal

from pymongo.errors import PyMongoError

from card_advisor.services.conversation import GREETING, Stage


def _chat(client, message, session_id="s1", **headers):
    return client.post("/api/chat", json={"message": message, "sessionId": session_id}, headers=headers)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "message": "Server is running"}


def test_list_cards_defaults(client):
    payload = client.get("/api/cards").get_json()
    assert payload["total"] == 25
    assert len(payload["cards"]) == 12
    assert payload["cards"][0]["id"] == 25


def test_list_cards_second_page_with_filters(client):
    response = client.get("/api/cards", query_string={"page": 2, "limit": 12, "sortBy": "Lowest Annual Fee"})
    cards = response.get_json()["cards"]
    assert [card["id"] for card in cards] == [20, 15, 19, 1, 18, 6, 11, 22, 17, 8, 10, 7]

    payload = client.get("/api/cards", query_string={"cardType": "Travel", "limit": 4}).get_json()
    assert payload["total"] == 9
    assert len(payload["cards"]) == 4


def test_list_cards_bad_paging_falls_back_to_defaults(client):
    payload = client.get("/api/cards", query_string={"page": "x", "limit": "y"}).get_json()
    assert len(payload["cards"]) == 12


def test_list_cards_store_error_is_500_without_detail(client, app, monkeypatch):
    def broken(*args, **kwargs):
        raise PyMongoError("secret connection string")

    monkeypatch.setattr(app.config["SERVICES"].catalog, "list_cards", broken)
    response = client.get("/api/cards")
    assert response.status_code == 500
    body = response.get_json()
    assert body["error"] == "internal_error"
    assert "secret" not in body["message"]


def test_get_card(client):
    response = client.get("/api/cards/3")
    assert response.status_code == 200
    assert response.get_json()["name"] == "SBI Simply Save"


def test_get_unknown_card_is_404(client):
    response = client.get("/api/cards/999")
    assert response.status_code == 404
    assert response.get_json()["message"] == "Card not found"


def test_create_card(client):
    response = client.post(
        "/api/cards",
        json={
            "name": "New Card",
            "issuer": "New Bank",
            "joiningFee": "0",
            "annualFee": "0",
            "rewardType": "Cashback",
            "rewardRate": "1%",
            "eligibilityCriteria": "Anyone",
            "specialPerks": [],
            "cardType": "General",
        },
    )
    assert response.status_code == 201
    assert response.get_json()["id"] == 26
    assert client.get("/api/cards/26").status_code == 200


def test_create_card_validation_error(client):
    response = client.post("/api/cards", json={"name": "Incomplete"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "bad_request"


def test_chat_requires_message_and_session(client):
    for body in ({"message": "hi"}, {"sessionId": "s1"}, {"message": "  ", "sessionId": "s1"}, ["hi"]):
        response = client.post("/api/chat", json=body)
        assert response.status_code == 400
        assert response.get_json()["message"] == "message and sessionId are required"


def test_chat_full_flow_returns_recommendations(client):
    first = _chat(client, "I earn 50 a month").get_json()
    assert first["stage"] == "spending"
    assert first["userProfile"] == {"monthlyIncome": 50000}
    assert first["recommendations"] == []

    second = _chat(client, "I love dining and travel").get_json()
    assert second["stage"] == "credit_score"
    assert second["userProfile"]["spendingCategories"] == ["dining", "travel"]

    third = _chat(client, "above 750").get_json()
    assert third["stage"] == "recommendations"
    assert third["userProfile"] == {
        "monthlyIncome": 50000,
        "spendingCategories": ["dining", "travel"],
        "creditScore": 780,
    }
    recs = third["recommendations"]
    assert 0 < len(recs) <= 5
    fees = [Decimal(card["annualFee"]) for card in recs]
    assert fees == sorted(fees)
    assert all(Decimal(card["minIncome"]) <= 50000 and card["minCreditScore"] <= 780 for card in recs)

    fourth = _chat(client, "thanks!").get_json()
    assert fourth["stage"] == "general"
    assert fourth["recommendations"] == []


def test_sessions_are_independent(client):
    _chat(client, "I earn 80000", session_id="a")
    other = _chat(client, "I earn 20", session_id="b").get_json()
    assert other["userProfile"] == {"monthlyIncome": 20000}
    assert other["stage"] == "spending"


def test_chat_history_replays_messages(client):
    _chat(client, "I earn 50 a month", session_id="h1")
    _chat(client, "shopping", session_id="h1")

    history = client.get("/api/chat/h1/history").get_json()
    assert [m["role"] for m in history] == ["assistant", "user", "assistant", "user", "assistant"]
    assert history[0]["content"] == GREETING
    assert history[3]["content"] == "shopping"


def test_chat_history_unknown_session_is_empty(client):
    response = client.get("/api/chat/nobody/history")
    assert response.status_code == 200
    assert response.get_json() == []


def test_chat_history_survives_session_eviction(client, app, database):
    _chat(client, "I earn 50 a month", session_id="gone", **{"X-User-Id": "alice"})
    app.config["SERVICES"].sessions._sessions.clear()

    history = client.get("/api/chat/gone/history", headers={"X-User-Id": "alice"}).get_json()
    assert [m["role"] for m in history] == ["assistant", "user", "assistant"]
    assert [m["content"] for m in history][:2] == [GREETING, "I earn 50 a month"]
    assert database["chat_history"].count_documents({"session_id": "gone", "user_id": "alice"}) == 3


def test_live_and_persisted_history_have_the_same_shape(client, app):
    _chat(client, "I earn 50 a month", session_id="same")
    _chat(client, "dining", session_id="same")
    live = client.get("/api/chat/same/history").get_json()

    app.config["SERVICES"].sessions._sessions.clear()
    persisted = client.get("/api/chat/same/history").get_json()
    assert [(m["role"], m["content"]) for m in persisted] == [(m["role"], m["content"]) for m in live]


def test_chat_history_is_scoped_to_the_user(client, app):
    _chat(client, "I earn 50 a month", session_id="mine", **{"X-User-Id": "alice"})
    assert client.get("/api/chat/mine/history", headers={"X-User-Id": "bob"}).get_json() == []

    app.config["SERVICES"].sessions._sessions.clear()
    assert client.get("/api/chat/mine/history", headers={"X-User-Id": "bob"}).get_json() == []
    assert len(client.get("/api/chat/mine/history", headers={"X-User-Id": "alice"}).get_json()) == 3


def test_chat_still_replies_when_history_cannot_be_saved(client, app, monkeypatch):
    services = app.config["SERVICES"]

    def broken(*args, **kwargs):
        raise PyMongoError("write failed")

    monkeypatch.setattr(services.chat_history, "append", broken)
    response = _chat(client, "I earn 50 a month", session_id="flaky")
    assert response.status_code == 200
    assert response.get_json()["stage"] == "spending"
    assert services.sessions.get("flaky").stage is Stage.SPENDING

    monkeypatch.undo()
    follow_up = _chat(client, "travel", session_id="flaky").get_json()
    assert follow_up["stage"] == "credit_score"
    assert follow_up["userProfile"]["spendingCategories"] == ["travel"]


def test_recommendations_endpoint(client):
    response = client.post("/api/recommendations", json={"monthlyIncome": "50000", "creditScore": "780"})
    assert response.status_code == 200
    names = [card["name"] for card in response.get_json()]
    assert names == [
        "ICICI Amazon Pay",
        "ICICI Platinum",
        "SBI Simply Save",
        "HDFC MoneyBack",
        "Union Bank of India Platinum",
    ]


def test_recommendations_without_preferences_returns_cheapest_five(client):
    cards = client.post("/api/recommendations", json={}).get_json()
    assert len(cards) == 5
    assert cards[0]["name"] == "ICICI Amazon Pay"


def test_recommendations_rejects_non_numeric_income(client):
    response = client.post("/api/recommendations", json={"monthlyIncome": "plenty"})
    assert response.status_code == 400


def test_recommendations_degrade_when_store_is_down(client, app, monkeypatch):
    def broken(*args, **kwargs):
        raise PyMongoError("down")

    monkeypatch.setattr(app.config["SERVICES"].catalog, "list_active", broken)
    response = client.post("/api/recommendations", json={"monthlyIncome": 50000})
    assert response.status_code == 200
    assert response.get_json() == []


def test_recommendations_survive_a_malformed_card(client, database):
    database["credit_cards"].update_one({"_id": 25}, {"$set": {"min_income": "abc"}})
    response = client.post("/api/recommendations", json={"monthlyIncome": 50000})
    assert response.status_code == 200
    assert [card["id"] for card in response.get_json()] == [1, 2, 3, 4, 5]


def test_favorites_flow(client):
    headers = {"X-User-Id": "alice"}
    added = client.post("/api/favorites", json={"cardId": 9}, headers=headers)
    assert added.status_code == 201
    assert added.get_json()["cardId"] == 9

    again = client.post("/api/favorites", json={"cardId": "9"}, headers=headers)
    assert again.get_json()["id"] == added.get_json()["id"]

    favorites = client.get("/api/favorites", headers=headers).get_json()
    assert [fav["card"]["name"] for fav in favorites] == ["HDFC Millennia"]
    assert client.get("/api/favorites").get_json() == []

    status = client.get("/api/favorites/9/status", headers=headers).get_json()
    assert status == {"favorited": True}

    assert client.delete("/api/favorites/9", headers=headers).get_json() == {"ok": True}
    assert client.get("/api/favorites/9/status", headers=headers).get_json() == {"favorited": False}
    assert client.delete("/api/favorites/9", headers=headers).status_code == 200


def test_favorite_validation(client):
    assert client.post("/api/favorites", json={}).status_code == 400
    assert client.post("/api/favorites", json={"cardId": "abc"}).status_code == 400
    assert client.post("/api/favorites", json={"cardId": 999}).status_code == 404


def test_unknown_route_is_json_404(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.get_json()["error"] == "not_found"


def test_wrong_method_is_405(client):
    response = client.put("/api/health")
    assert response.status_code == 405
    assert response.get_json()["error"] == "method_not_allowed"
