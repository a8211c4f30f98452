"""Verbindungsdaten des ChirpStack-Servers.

Eine Instanz wird einmal pro Server erzeugt und von beliebig vielen Pipelines
nur gelesen."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from config import CHIRPSTACK_API_TOKEN, CHIRPSTACK_SECURE, CHIRPSTACK_SERVER
from models.errors import ConfigurationError


class ChirpStackServer(BaseModel):
    """Kapselt Adresse und API-Token fuer die gRPC-API.

    Attributes:
        server: `host:port` der ChirpStack-API.
        api_token: API-Token, wird als `Bearer`-Header gesendet.
        secure: TLS-Kanal statt unverschluesselter Verbindung.
    """

    model_config = ConfigDict(frozen=True)

    server: str = ""
    api_token: str = ""
    secure: bool = False

    @classmethod
    def from_settings(cls) -> "ChirpStackServer":
        return cls(server=CHIRPSTACK_SERVER, api_token=CHIRPSTACK_API_TOKEN, secure=CHIRPSTACK_SECURE)

    def validate_config(self) -> None:
        """Prueft, dass Server und Token gesetzt sind.

        Raises:
            ConfigurationError: Wenn eines der Felder leer ist.
        """

        if not self.server or not self.api_token:
            raise ConfigurationError("Server oder API-Token nicht konfiguriert")

    def auth_metadata(self) -> list[tuple[str, str]]:
        return [("authorization", f"Bearer {self.api_token}")]
