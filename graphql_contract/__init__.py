"""
GraphQL Contract Testing Suite

End-to-end contract validation of the GraphQLZero demo API (users and albums):
query results, mutation side effects, pagination, nested relations and error
responses, against a service this suite does not own.
"""

__version__ = "1.0.0"
