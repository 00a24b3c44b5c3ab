""" Errors raised by the @nonNull directive

There are two kinds of them:

* ConfigurationError: the schema itself is wrong. Raised once, at startup, when the schema is transformed.
  Your application should not start.
* InputValidationError: a client has sent a `null` where the directive does not allow it.
  Raised from a resolver. The GraphQL engine reports it to the client as a normal error.
"""

import graphql


class ConfigurationError(ValueError):
    """ The directive is misapplied in the schema

    Example: @nonNull on a field that is already non-null:

        input UserInput {
            login: String! @nonNull
        }
    """


class InputValidationError(graphql.GraphQLError):
    """ An input field marked with @nonNull was explicitly given a `null`

    This is the default error. Override it with `create_non_null_directive(build_input_error=...)`
    """
