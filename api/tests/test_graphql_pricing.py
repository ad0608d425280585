"""Integration tests for GraphQL curve and pricing queries."""

from fastapi.testclient import TestClient

from app.main import app


client = TestClient(app)

REFERENCE_CURVE = {
    "name": "SVENSSON",
    "beta0": 0.02,
    "beta1": -0.01,
    "beta2": 0.03,
    "beta3": -0.02,
    "tau1": 2.0,
    "tau2": 10.0,
}

PRICE_SWAPTION = """
query PriceSwaption($swaption: SwaptionInput!, $market: MarketInput!) {
  priceSwaption(swaption: $swaption, market: $market) {
    premium
    forwardSwapRate
    fixedLegPv
    floatingLegPv
  }
}
"""


def _swaption_vars(**overrides):
    swaption = {
        "curve": "SVENSSON",
        "notional": 1_000_000,
        "strike": 0.05,
        "expiry": 2.0,
        "volatility": 0.2,
        "swapMaturityPeriods": 5,
        "isPayer": True,
    }
    swaption.update(overrides)
    return {"swaption": swaption, "market": {"curves": [REFERENCE_CURVE]}}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_price_swaption_matches_cli_reference():
    """Reference payer swaption prices to 950,000 with a forward rate of 1."""
    response = client.post(
        "/graphql", json={"query": PRICE_SWAPTION, "variables": _swaption_vars()}
    )
    assert response.status_code == 200
    data = response.json()
    assert "errors" not in data
    result = data["data"]["priceSwaption"]
    assert result["forwardSwapRate"] == 1.0
    assert abs(result["premium"] - 950_000.0) < 1e-3
    assert result["fixedLegPv"] == result["floatingLegPv"]
    assert 4_000_000 < result["fixedLegPv"] < 5_000_000


def test_price_receiver_swaption():
    response = client.post(
        "/graphql",
        json={"query": PRICE_SWAPTION, "variables": _swaption_vars(isPayer=False)},
    )
    data = response.json()
    assert "errors" not in data
    assert 0 <= data["data"]["priceSwaption"]["premium"] < 1e-6


def test_price_swaption_zero_volatility_returns_error():
    """Zero volatility is rejected, not priced as a limit."""
    response = client.post(
        "/graphql",
        json={"query": PRICE_SWAPTION, "variables": _swaption_vars(volatility=0.0)},
    )
    assert response.status_code == 200
    data = response.json()
    assert "errors" in data
    assert any("volatility must be > 0" in e["message"] for e in data["errors"])


def test_price_swaption_missing_curve_returns_error():
    response = client.post(
        "/graphql",
        json={"query": PRICE_SWAPTION, "variables": _swaption_vars(curve="MISSING")},
    )
    data = response.json()
    assert "errors" in data
    assert any("curve" in e["message"].lower() for e in data["errors"])


def test_price_swaption_zero_periods_returns_error():
    response = client.post(
        "/graphql",
        json={"query": PRICE_SWAPTION, "variables": _swaption_vars(swapMaturityPeriods=0)},
    )
    data = response.json()
    assert "errors" in data
    assert any("swap_maturity_periods" in e["message"] for e in data["errors"])


def test_price_swaption_bad_tau_returns_error():
    variables = _swaption_vars()
    variables["market"]["curves"] = [dict(REFERENCE_CURVE, tau1=0.0)]
    response = client.post("/graphql", json={"query": PRICE_SWAPTION, "variables": variables})
    data = response.json()
    assert "errors" in data
    assert any("tau1 must be > 0" in e["message"] for e in data["errors"])


def test_price_swap_float_minus_fixed():
    """Swap at a zero-discount curve: NPV = N * (1 - fixed) * M."""
    query = """
    query {
      priceSwap(
        swap: { curve: "FLAT", notional: 1000000, fixedRate: 0.05, maturityPeriods: 5 }
        market: {
          curves: [{ name: "FLAT", beta0: 0.0, beta1: 0.0, beta2: 0.0, beta3: 0.0, tau1: 1.0, tau2: 1.0 }]
        }
      ) { npv }
    }
    """
    response = client.post("/graphql", json={"query": query})
    assert response.status_code == 200
    data = response.json()
    assert "errors" not in data
    assert abs(data["data"]["priceSwap"]["npv"] - 4_750_000.0) < 1e-6


def test_price_swap_empty_market_returns_error():
    query = """
    query {
      priceSwap(
        swap: { curve: "FLAT", notional: 1000000, fixedRate: 0.05, maturityPeriods: 5 }
        market: { curves: [] }
      ) { npv }
    }
    """
    data = client.post("/graphql", json={"query": query}).json()
    assert "errors" in data
    assert any("must not be empty" in e["message"] for e in data["errors"])


def test_spot_rates():
    query = """
    query SpotRates($curve: SvenssonCurveInput!, $times: [Float!]!) {
      spotRates(curve: $curve, times: $times)
    }
    """
    response = client.post(
        "/graphql",
        json={"query": query, "variables": {"curve": REFERENCE_CURVE, "times": [1.0, 5.0]}},
    )
    data = response.json()
    assert "errors" not in data
    rates = data["data"]["spotRates"]
    assert len(rates) == 2
    assert abs(rates[0] - 0.0166070857891) < 1e-10


def test_spot_rates_at_zero_time_returns_error():
    query = """
    query SpotRates($curve: SvenssonCurveInput!) {
      spotRates(curve: $curve, times: [0.0])
    }
    """
    data = client.post(
        "/graphql", json={"query": query, "variables": {"curve": REFERENCE_CURVE}}
    ).json()
    assert "errors" in data
    assert any("t must be > 0" in e["message"] for e in data["errors"])


def test_version():
    response = client.post("/graphql", json={"query": "{ version }"})
    assert response.status_code == 200
    assert response.json()["data"]["version"] == "0.1.0"
