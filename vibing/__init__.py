"""Client for the Vibes backend with Keycloak device-code authentication."""

__version__ = "1.0.0"