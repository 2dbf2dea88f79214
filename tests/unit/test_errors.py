from graphql_contract.core.errors import UNKNOWN_ERROR_MESSAGE, GraphQLRequestError


class TestGraphQLRequestError:

    def test_first_message_wins(self):
        error = GraphQLRequestError([{"message": "first"}, {"message": "second"}])

        assert error.message == "first"
        assert str(error) == "first"
        assert error.messages == ["first", "second"]

    def test_empty_errors(self):
        assert GraphQLRequestError([]).message == UNKNOWN_ERROR_MESSAGE

    def test_from_transport(self):
        error = GraphQLRequestError.from_transport(503, "Service Unavailable", document="{ a }")

        assert error.status_code == 503
        assert error.document == "{ a }"
        assert error.message == "HTTP 503: response is not a GraphQL envelope (Service Unavailable)"

    def test_from_transport_truncates_body(self):
        error = GraphQLRequestError.from_transport(500, "x" * 1000)

        assert len(error.message) < 300

    def test_mentions_searches_every_message(self):
        error = GraphQLRequestError([{"message": "first"}, {"message": "Field \"email\" is required"}])

        assert error.mentions("EMAIL")
        assert error.is_validation_error("email")
        assert not error.mentions("title")

    def test_taxonomy(self):
        assert GraphQLRequestError([{"message": "User not found"}]).is_not_found()
        assert GraphQLRequestError([{"message": 'Cannot query field "x" on type "Query".'}]).is_schema_error()
        assert GraphQLRequestError([{"message": "Unauthorized"}]).is_authentication_error()
        assert not GraphQLRequestError([{"message": "Internal error"}]).is_not_found()

    def test_repr(self):
        error = GraphQLRequestError([{"message": "boom"}], status_code=400)

        assert repr(error) == "GraphQLRequestError(message='boom', status_code=400)"
