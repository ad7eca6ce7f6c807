"""
Use cases for the bookstore API.

Service modules orchestrate repositories to implement business rules
(validate a new book, detect duplicates, delete by id). Routers call these
services instead of touching the JSON file directly.
"""
