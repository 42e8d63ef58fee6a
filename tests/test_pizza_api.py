from fastapi.testclient import TestClient

from pizza_agent import pizza_api
from pizza_agent.estimator import EstimationRequest
from pizza_agent.pizza_api import app

client = TestClient(app)


def test_calculate_pizza():
    resp = client.post("/calculate_pizza", json={"people_count": 6, "appetite_level": "heavy"})
    assert resp.status_code == 200
    assert resp.json() == {
        "pizzas_needed": 9,
        "recommendation": "For 6 people with heavy appetite, order 9 pizzas.",
    }


def test_default_appetite_is_average():
    resp = client.post("/calculate_pizza", json={"people_count": 4})
    assert resp.json()["pizzas_needed"] == 4


def test_unknown_appetite_falls_back():
    resp = client.post("/calculate_pizza", json={"people_count": 1, "appetite_level": "bogus"})
    assert resp.json()["pizzas_needed"] == 1


def test_rejects_empty_party():
    resp = client.post("/calculate_pizza", json={"people_count": 0})
    assert resp.status_code == 422


def test_endpoint_uses_estimation_request(monkeypatch):
    seen = []
    real_estimate = pizza_api.estimate

    def spy(request):
        seen.append(request)
        return real_estimate(request)

    monkeypatch.setattr(pizza_api, "estimate", spy)
    resp = client.post("/calculate_pizza", json={"people_count": 5, "appetite_level": "light"})
    assert resp.json()["pizzas_needed"] == 3
    assert seen == [EstimationRequest(party_size=5, appetite="light")]
