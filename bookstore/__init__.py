"""Bookstore API: CRUD over a collection of books kept in one JSON file."""
