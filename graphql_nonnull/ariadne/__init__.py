""" Ariadne bindings for the @nonNull directive

Example:
    from graphql_nonnull.ariadne import directives_map, DIRECTIVE_SDL

    schema = ariadne.make_executable_schema(type_defs + DIRECTIVE_SDL, Query, Mutation, directives=directives_map)
"""

from .directive import (
    DIRECTIVE_NAME,
    DIRECTIVE_SDL,
    NonNullDirectiveVisitor,
    make_directive_visitor,
    directives_map,
)
