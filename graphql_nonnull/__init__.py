""" @nonNull: optional GraphQL input fields that cannot be null

Example:
    import graphql
    import graphql_nonnull

    gql_schema = graphql.build_schema(GQL_SCHEMA + graphql_nonnull.DIRECTIVE_SDL)
    ... bind your resolvers ...
    graphql_nonnull.install_directive_to_schema(gql_schema)

For Ariadne, see `graphql_nonnull.ariadne`
"""

from .directive import (
    DIRECTIVE_NAME,
    DIRECTIVE_SDL,
    NonNullDirective,
    directive_sdl,
    create_non_null_directive,
    install_directive_to_schema,
)
from .errors import ConfigurationError, InputValidationError
from .paths import TaggedPath, find_tagged_paths
from .resolver import NonNullResolver
