"""Inquiry Desk backend - inquiry lifecycle engine behind a JSON HTTP API."""
