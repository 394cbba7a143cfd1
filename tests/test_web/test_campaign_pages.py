"""Tests for the campaign list and detail pages."""

from decimal import Decimal

import pytest
import yaml

from tailspin.campaign.models import CampaignDraft
from tailspin.config.loader import ConfigError
from tailspin.config.models import WebConfig
from tailspin.storage.memory_store import MemoryStore
from tailspin.web.app import create_app, format_money

SAMPLE = [
    CampaignDraft(
        name="Sky Surfer",
        description="Foam glider with LED wingtips",
        goal_amount=5000,
        current_amount=1200,
    ),
    CampaignDraft(name="RoboRacer", goal_amount=8000, current_amount=3500),
]


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def app(store):
    flask_app = create_app(store=store, dataset=SAMPLE)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


def test_create_app_seeds_store(store, app):
    assert store.count() == 2
    assert store.find_by_id(1).name == "Sky Surfer"


def test_create_app_does_not_reseed(store):
    create_app(store=store, dataset=SAMPLE)
    create_app(store=store, dataset=SAMPLE)
    assert store.count() == 2


def test_default_dataset():
    app = create_app()
    store = app.extensions["tailspin"]["store"]
    assert store.count() == 4


def test_seed_file_from_config(tmp_path):
    path = tmp_path / "seed.yaml"
    path.write_text(yaml.dump([{"name": "Kite", "goal_amount": 10}]))
    app = create_app(WebConfig(seed_file=path))
    app.config["TESTING"] = True
    response = app.test_client().get("/")
    assert b"Kite" in response.data


def test_bad_seed_file_raises(tmp_path):
    with pytest.raises(ConfigError):
        create_app(WebConfig(seed_file=tmp_path / "missing.yaml"))


def test_secret_key_from_env(monkeypatch):
    monkeypatch.setenv("TAILSPIN_SECRET_KEY", "from-env")
    app = create_app(WebConfig(secret_key="from-config"), dataset=[])
    assert app.secret_key == "from-env"


def test_secret_key_from_config(monkeypatch):
    monkeypatch.delenv("TAILSPIN_SECRET_KEY", raising=False)
    app = create_app(WebConfig(secret_key="from-config"), dataset=[])
    assert app.secret_key == "from-config"


def test_index_lists_campaigns(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b"Sky Surfer" in response.data
    assert b"RoboRacer" in response.data
    assert b"Foam glider with LED wingtips" in response.data
    assert b"$1,200 raised of $5,000 goal" in response.data
    assert b'href="/campaign/1"' in response.data
    assert b'href="/campaign/2"' in response.data


def test_index_preserves_insertion_order(client):
    body = client.get("/").data
    assert body.index(b"Sky Surfer") < body.index(b"RoboRacer")


def test_index_empty_store():
    app = create_app(dataset=[])
    app.config["TESTING"] = True
    response = app.test_client().get("/")
    assert response.status_code == 200
    assert b"No Campaigns Yet" in response.data


def test_detail_page(client):
    response = client.get("/campaign/2")
    assert response.status_code == 200
    assert b"RoboRacer" in response.data
    assert b"Sky Surfer" not in response.data
    assert b"(43%)" in response.data


def test_detail_by_query_param(client):
    response = client.get("/campaign?id=1")
    assert response.status_code == 200
    assert b"Sky Surfer" in response.data


def test_detail_missing_redirects(client):
    response = client.get("/campaign/3")
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/")


def test_detail_missing_flashes_message(client):
    response = client.get("/campaign/99", follow_redirects=True)
    assert response.status_code == 200
    assert b"Campaign not found" in response.data


@pytest.mark.parametrize(
    "url",
    ["/campaign", "/campaign?id=abc", "/campaign?id=0", "/campaign/-1", "/campaign?id=-1"],
)
def test_detail_bad_id_redirects(client, url):
    response = client.get(url)
    assert response.status_code == 302


def test_funded_campaign_detail():
    app = create_app(
        dataset=[CampaignDraft(name="Done", goal_amount=100, current_amount=150)]
    )
    app.config["TESTING"] = True
    response = app.test_client().get("/campaign/1")
    assert b"Fully funded!" in response.data
    assert b"(150%)" in response.data


def test_currency_symbol(store):
    app = create_app(WebConfig(currency_symbol="€"), store=store, dataset=SAMPLE)
    app.config["TESTING"] = True
    response = app.test_client().get("/campaign/1")
    assert "€1,200".encode() in response.data


class TestFormatMoney:
    def test_whole_amount(self):
        assert format_money(Decimal("50000")) == "$50,000"

    def test_cents(self):
        assert format_money(Decimal("1234.5")) == "$1,234.50"

    def test_symbol(self):
        assert format_money(Decimal("7"), "£") == "£7"


def test_config_registered_on_app(store):
    config = WebConfig(currency_symbol="£")
    app = create_app(config, store=store, dataset=SAMPLE)
    assert app.extensions["tailspin"]["config"] is config
    assert "CURRENCY_SYMBOL" not in app.config
