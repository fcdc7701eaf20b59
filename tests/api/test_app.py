"""API tests for the application factory in myclinic.main.

Verifies that create_app() wires settings, the schema registry and the locale
routing configuration onto app.state and mounts every router.
"""

from fastapi.testclient import TestClient

from myclinic.config import AppSettings
from myclinic.i18n import SupportedLocale
from myclinic.main import create_app
from myclinic.validation import default_registry


class TestCreateApp:
    """Tests for create_app()."""

    def test_stores_settings_and_registry(self) -> None:
        """Settings and the default registry are placed on app.state."""
        settings = AppSettings(environment="test")

        app = create_app(settings)

        assert app.state.app_settings is settings
        assert app.state.schema_registry is default_registry
        assert app.state.environment == "test"

    def test_default_locale_from_settings(self) -> None:
        """MYCLINIC_DEFAULT_LOCALE drives the routing configuration."""
        app = create_app(AppSettings(default_locale="ckb"))

        assert app.state.locale_routing.default_locale == SupportedLocale.CKB
        body = TestClient(app).get("/api/locales/current").json()
        assert body["locale"] == "ckb"

    def test_mounts_routers(self) -> None:
        """Health, schema and locale routes are served."""
        client = TestClient(create_app(AppSettings()))

        assert client.get("/health").status_code == 200
        assert client.get("/api/schemas").status_code == 200
        assert client.get("/api/locales").status_code == 200

    def test_cors_allows_configured_origin(self) -> None:
        """Configured origins receive CORS headers."""
        settings = AppSettings(cors_origins=["https://clinic.example.org"])
        client = TestClient(create_app(settings))

        response = client.get(
            "/health", headers={"Origin": "https://clinic.example.org"}
        )

        assert response.headers["access-control-allow-origin"] == (
            "https://clinic.example.org"
        )
