"""
Unit tests for api/routes/translate.py and api/routes/health.py.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from api.deps import build_orchestrator, get_orchestrator
from api.main import app
from config.settings import Settings
from core.glossary import AirtableTableStore, TableResolver
from core.translation import LangdockEngine, TranslationOrchestrator


@pytest.fixture
def override_orchestrator():
    """Install an orchestrator for the duration of one test."""
    def install(orchestrator):
        app.dependency_overrides[get_orchestrator] = lambda: orchestrator
        return orchestrator

    yield install
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


class TestTranslateEndpoint:
    def test_glossary_translation(self, client, override_orchestrator, make_store, make_translator, german_rows):
        translator = make_translator()
        override_orchestrator(TranslationOrchestrator(
            translator, resolver=TableResolver(make_store({"German translations": german_rows}))
        ))

        resp = client.post("/api/translate", json={
            "text": "Cancel", "targetLanguage": "German", "useGlossary": True,
        })

        assert resp.status_code == 200
        assert resp.json() == {
            "translatedText": "Abbrechen",
            "originalText": "Cancel",
            "targetLanguage": "German",
        }
        assert translator.calls == []

    def test_defaults_to_german_without_glossary(self, client, override_orchestrator, make_translator):
        translator = make_translator(output="'Hallo'")
        override_orchestrator(TranslationOrchestrator(translator))

        resp = client.post("/api/translate", json={"text": "Hello"})

        assert resp.status_code == 200
        assert resp.json()["translatedText"] == "Hallo"
        assert resp.json()["targetLanguage"] == "German"
        assert translator.calls == [("Hello", "German")]

    def test_missing_text(self, client, override_orchestrator, make_translator):
        override_orchestrator(TranslationOrchestrator(make_translator()))

        resp = client.post("/api/translate", json={"targetLanguage": "German"})

        assert resp.status_code == 400
        assert resp.json() == {"error": "Text to translate is required"}

    def test_empty_text(self, client, override_orchestrator, make_translator):
        override_orchestrator(TranslationOrchestrator(make_translator()))
        resp = client.post("/api/translate", json={"text": ""})
        assert resp.status_code == 400

    def test_translator_not_configured(self, client, override_orchestrator, make_translator):
        override_orchestrator(TranslationOrchestrator(make_translator(available=False)))

        resp = client.post("/api/translate", json={"text": "Hello"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Translation service not configured"}

    def test_fallback_failure(self, client, override_orchestrator, make_translator):
        override_orchestrator(TranslationOrchestrator(
            make_translator(success=False, status_code=502, error="Langdock API error: 502")
        ))

        resp = client.post("/api/translate", json={"text": "Hello"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Translation failed", "details": "Langdock API error: 502"}

    def test_get_not_allowed(self, client):
        assert client.get("/api/translate").status_code == 405

    def test_cors_preflight(self, client):
        resp = client.options("/api/translate", headers={
            "Origin": "https://www.figma.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        })
        assert resp.status_code == 200
        assert "POST" in resp.headers["access-control-allow-methods"]

    def test_bare_options_is_not_a_preflight(self, client):
        # Only CORS preflights (Origin + Access-Control-Request-Method) are answered
        assert client.options("/api/translate").status_code == 405


class TestHealth:
    def test_health(self, client, override_orchestrator, make_store, make_translator):
        override_orchestrator(TranslationOrchestrator(
            make_translator(), resolver=TableResolver(make_store())
        ))

        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert data["glossary_configured"] is True
        assert data["translator_configured"] is True
        assert data["translator"] == {
            "id": "fake", "name": "Fake", "available": True, "status": "available",
        }

    def test_health_without_credentials(self, client, override_orchestrator, make_translator):
        override_orchestrator(TranslationOrchestrator(make_translator(available=False)))

        data = client.get("/health").json()

        assert data["glossary_configured"] is False
        assert data["translator_configured"] is False
        assert data["translator"]["status"] == "unavailable"


class TestBuildOrchestrator:
    def test_without_glossary_credentials(self):
        orchestrator = build_orchestrator(Settings(
            langdock_api_key="ld", airtable_api_key="", airtable_base_id="",
        ))
        assert isinstance(orchestrator.translator, LangdockEngine)
        assert orchestrator.resolver is None
        assert orchestrator.glossary_configured is False

    def test_with_glossary_credentials(self):
        orchestrator = build_orchestrator(Settings(
            langdock_api_key="ld", airtable_api_key="at", airtable_base_id="appX", glossary_timeout=3,
        ))
        assert orchestrator.glossary_configured is True
        store = orchestrator.resolver.store
        assert isinstance(store, AirtableTableStore)
        assert store.base_id == "appX"

    def test_glossary_decision_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="api.deps"):
            build_orchestrator(Settings(langdock_api_key="ld", airtable_api_key="", airtable_base_id=""))
        assert "Glossary credentials missing" in caplog.text

    def test_settings_helpers(self):
        cfg = Settings(cors_origins="https://a.example, https://b.example", langdock_api_key="")
        assert cfg.get_cors_origins() == ["https://a.example", "https://b.example"]
        assert cfg.translator_configured is False
        assert Settings(cors_origins="").get_cors_origins() == ["*"]
