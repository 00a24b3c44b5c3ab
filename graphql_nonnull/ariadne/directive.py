import ariadne
import graphql


# See this module for the docs
from graphql_nonnull import directive as nonnull

# Directive definition. As a string.
DIRECTIVE_SDL = nonnull.DIRECTIVE_SDL

# Directive name
DIRECTIVE_NAME = nonnull.DIRECTIVE_NAME


def make_directive_visitor(directive: nonnull.NonNullDirective) -> type[ariadne.SchemaDirectiveVisitor]:
    """ Make an Ariadne directive visitor for a configured @nonNull directive

    Example:
        nonnull = create_non_null_directive('notNull', build_input_error=E_API_ARGUMENT)

        schema = ariadne.make_executable_schema(
            type_defs + nonnull.declaration,
            Query, Mutation,
            directives={nonnull.name: make_directive_visitor(nonnull)},
        )
    """
    class NonNullDirectiveVisitor(ariadne.SchemaDirectiveVisitor):
        """ Directive @nonNull: optional input field that cannot be null """
        def visit_input_field_definition(self, field: graphql.GraphQLInputField, object_type: graphql.GraphQLInputObjectType) -> graphql.GraphQLInputField:
            directive.check_field(field, object_type)

            # The field itself cannot enforce anything: resolvers that use it have to.
            # The whole schema is processed on the first visit; every other visit is a no-op
            directive.transform(self.schema)
            return field

    return NonNullDirectiveVisitor


# Directive @nonNull with the default configuration
NonNullDirectiveVisitor = make_directive_visitor(nonnull.create_non_null_directive())


# Directives mapping: for make_executable_schema()
directives_map = {
    DIRECTIVE_NAME: NonNullDirectiveVisitor,
}
