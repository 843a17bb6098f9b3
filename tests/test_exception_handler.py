from graphql import GraphQLError

from core.domain.exceptions import AuthorizationException, EntityNotFoundException, ValidationException
from core.infrastructure.exception_handler import error_category, handle_error
from core.infrastructure.graphql.exceptions import GraphQlInputException


def wrap(exc):
    return GraphQLError(str(exc), path=["getProductList"], original_error=exc)


def test_graphql_exceptions_keep_their_category():
    error = handle_error(wrap(GraphQlInputException("bad page")))

    assert error.message == "bad page"
    assert error.extensions["category"] == "graphql-input"


def test_domain_exceptions_are_categorized():
    assert error_category(EntityNotFoundException("customer", 3)) == "graphql-no-such-entity"
    assert error_category(ValidationException("sku", "bad")) == "graphql-input"
    assert error_category(AuthorizationException(None, "getProductList")) == "graphql-authorization"
    assert error_category(RuntimeError("boom")) is None


def test_unexpected_errors_are_masked(settings):
    settings.DEBUG = False

    error = handle_error(wrap(RuntimeError("database password is hunter2")))

    assert error.message == "Internal server error"
    assert error.extensions == {"category": "internal"}
    assert error.path == ["getProductList"]


def test_unexpected_errors_are_visible_in_debug(settings):
    settings.DEBUG = True

    error = handle_error(wrap(RuntimeError("boom")))

    assert error.message == "boom"
    assert error.extensions["category"] == "internal"


def test_errors_without_original_are_input_errors():
    error = handle_error(GraphQLError("Cannot query field 'x'"))
    assert error.extensions == {"category": "graphql-input"}
