from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import firebase_admin
from firebase_admin import credentials, firestore

logger = logging.getLogger(__name__)


@dataclass
class FirestoreConfig:
    """Service-account fields for the Firebase Admin SDK."""

    project_id: str = ""
    private_key_id: str = ""
    private_key: str = ""
    client_email: str = ""
    client_id: str = ""
    auth_uri: str = "https://accounts.google.com/o/oauth2/auth"
    token_uri: str = "https://oauth2.googleapis.com/token"
    auth_provider_x509_cert_url: str = "https://www.googleapis.com/oauth2/v1/certs"
    client_x509_cert_url: str = ""
    universe_domain: str = "googleapis.com"

    def service_account_info(self) -> dict[str, Any]:
        return {
            "type": "service_account",
            "project_id": self.project_id,
            "private_key_id": self.private_key_id,
            # Env vars carry the PEM with escaped newlines.
            "private_key": self.private_key.replace("\\n", "\n"),
            "client_email": self.client_email,
            "client_id": self.client_id,
            "auth_uri": self.auth_uri,
            "token_uri": self.token_uri,
            "auth_provider_x509_cert_url": self.auth_provider_x509_cert_url,
            "client_x509_cert_url": self.client_x509_cert_url,
            "universe_domain": self.universe_domain,
        }


class FirestoreConnection:
    """Singleton-like Firestore client factory.

    Note: The Firebase app is initialized lazily on first use, so building the
    container does not require network access.
    """

    _instance: Optional["FirestoreConnection"] = None

    def __init__(self, config: FirestoreConfig):
        self._config = config
        self._client = None

    @classmethod
    def get_instance(cls, config: FirestoreConfig) -> "FirestoreConnection":
        if cls._instance is None:
            cls._instance = FirestoreConnection(config)
        return cls._instance

    def client(self):
        if self._client is None:
            try:
                app = firebase_admin.get_app()
            except ValueError:
                cred = credentials.Certificate(self._config.service_account_info())
                app = firebase_admin.initialize_app(cred)
                logger.info("Firebase initialized for project %s", self._config.project_id)
            self._client = firestore.client(app)
        return self._client
