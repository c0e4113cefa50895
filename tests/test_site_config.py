import pytest

from app.core.exceptions import ValidationException
from app.models.site_config import SiteConfig
from app.schemas.site_config import SiteConfigUpdate
from app.services import site_config_service


def test_get_config_returns_defaults(client):
    response = client.get("/api/config")
    assert response.status_code == 200
    body = response.json()
    assert body["companyName"] == "Voorbeeld Bedrijf BV"
    assert body["aboutTitle"] == "Over Ons"
    assert body["primaryColor"] == "#2563eb"
    assert body["fontFamily"] == "Inter"


def test_put_config_merges_supplied_fields(client, db_session):
    response = client.put("/api/config", json={"companyName": "A BV", "heroTitle": "Hero A", "phone": "010"})
    assert response.status_code == 200

    response = client.put("/api/config", json={"heroTitle": "Hero B"})
    assert response.status_code == 200
    body = response.json()
    assert body["companyName"] == "A BV"
    assert body["heroTitle"] == "Hero B"
    assert body["phone"] == "010"

    assert db_session.query(SiteConfig).count() == 1


def test_put_config_accepts_snake_case(client):
    body = client.put("/api/config", json={"company_name": "Snake BV"}).json()
    assert body["companyName"] == "Snake BV"


def test_put_config_null_company_name_returns_400(client):
    response = client.put("/api/config", json={"companyName": None})
    assert response.status_code == 400


def test_put_config_wrong_type_returns_400(client):
    response = client.put("/api/config", json={"heroTitle": 42})
    assert response.status_code == 400


def test_upsert_creates_row_when_missing(db_session):
    assert site_config_service.get_site_config(db_session, create_if_missing=False) is None

    config = site_config_service.upsert_site_config(
        db_session, SiteConfigUpdate(companyName="Nieuw BV")
    )
    assert config.id == 1
    assert config.company_name == "Nieuw BV"
    # Valores por defecto de la tabla
    assert config.secondary_color == "#1e40af"
    assert db_session.query(SiteConfig).count() == 1


def test_upsert_without_company_name_on_first_creation_fails(db_session):
    with pytest.raises(ValidationException):
        site_config_service.upsert_site_config(db_session, SiteConfigUpdate(heroTitle="x"))
    assert db_session.query(SiteConfig).count() == 0


def test_get_creates_singleton_only_once(db_session):
    first = site_config_service.get_site_config(db_session)
    second = site_config_service.get_site_config(db_session)
    assert first.id == second.id == 1
    assert db_session.query(SiteConfig).count() == 1
