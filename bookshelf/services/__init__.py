"""
High-level use cases for the Bookshelf API.

Services orchestrate the storage adapter to implement the create/read/update/
delete rules for authors and books. GraphQL resolvers call these services
instead of manipulating the JSON document directly.
"""
