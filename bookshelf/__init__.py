"""Bookshelf: a GraphQL API over a JSON file of authors and books."""
