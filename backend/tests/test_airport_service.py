from trippulse.services.airport_service import airport_service


def test_city_search_includes_fiumicino():
    results = airport_service.search_airports("Rome")
    assert len(results) > 0
    fco = next((a for a in results if a["iata"] == "FCO"), None)
    assert fco is not None
    assert "Rome" in fco["city"]


def test_iata_search():
    results = airport_service.search_airports("BCN")
    assert any(a["iata"] == "BCN" for a in results)


def test_search_is_case_insensitive():
    assert airport_service.search_airports("rOmE") == airport_service.search_airports("Rome")


def test_gibberish_returns_nothing():
    assert airport_service.search_airports("xyzqw") == []


def test_short_query_returns_nothing():
    assert airport_service.search_airports("a") == []
    assert airport_service.search_airports("F") == []
    assert airport_service.search_airports("") == []


def test_country_match_is_capped_and_in_table_order():
    results = airport_service.search_airports("Italy")
    assert len(results) == 10
    assert [a["iata"] for a in results[:3]] == ["FCO", "MXP", "LIN"]


def test_custom_limit():
    assert len(airport_service.search_airports("an", limit=3)) == 3
