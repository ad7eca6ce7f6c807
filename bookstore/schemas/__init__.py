"""Pydantic models describing the HTTP surface of the bookstore API."""
