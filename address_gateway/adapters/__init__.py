"""Clients for the external APIs the gateway talks to."""
