""" @nonNull directive

Implements optional input fields that cannot be null: the field can be skipped, but when provided, it must not be `null`.
GraphQL only has "required & non-null" (`String!`) and "optional & nullable" (`String`). This is the third option.

Example:

    input UpdateUserInput {
        # Can be skipped, but cannot be set to null
        firstName: String @nonNull
        # Can be skipped, can be null
        middleName: String
    }

    type Mutation {
        updateUser(input: UpdateUserInput!): User
    }

Now you can submit the following objects:

    {}
    {'firstName': 'John'}
    {'middleName': None}

but you cannot submit

    {'firstName': None}

GraphQL does not tell us which fields use a given input, so the whole schema is scanned:
every field that has a tagged input somewhere in its arguments gets its resolver wrapped.
Note that this directive works exclusively on the server: clients see the field as nullable.
"""
from __future__ import annotations

import logging
from collections import abc
from dataclasses import dataclass
from typing import Any

import graphql

from .ast import has_directive
from .errors import ConfigurationError, InputValidationError
from .paths import TaggedPath, find_tagged_paths
from .resolver import wrap_field_resolvers
from .types import TypeKind, type_kind


logger = logging.getLogger(__name__)


# Directive name
DIRECTIVE_NAME = 'nonNull'


def directive_sdl(directive_name: str = DIRECTIVE_NAME) -> str:
    """ Directive definition for a custom directive name """
    # language=graphql
    return f'''
directive @{directive_name} on INPUT_FIELD_DEFINITION
'''


# Directive definition
DIRECTIVE_SDL = directive_sdl(DIRECTIVE_NAME)


@dataclass(frozen=True)
class NonNullDirective:
    """ The @nonNull directive, configured

    Usage:
        nonnull = create_non_null_directive()

        gql_schema = graphql.build_schema(GQL_SCHEMA + nonnull.declaration)
        ... bind your resolvers ...
        nonnull.transform(gql_schema)
    """
    # The name to declare and look for
    name: str = DIRECTIVE_NAME

    # Makes the error to raise when a `null` is found. Gets the message.
    build_input_error: abc.Callable[[str], Exception] = InputValidationError

    @property
    def declaration(self) -> str:
        """ Directive definition. Add it to your schema. """
        return directive_sdl(self.name)

    def transform(self, schema: graphql.GraphQLSchema) -> graphql.GraphQLSchema:
        """ Install the directive into a GraphQL schema

        Validates every tagged input field, then wraps the resolvers of every field that uses them.
        Only does it once: a second call on the same schema does nothing.

        Raises:
            ConfigurationError: the directive is misapplied
        """
        if self.is_installed(schema):
            logger.debug('Schema already has @%s installed. Skipping', self.name)
            return schema

        # Collect first, wrap later: no resolver is touched until every input field is validated
        fields_to_wrap: list[tuple[str, str, graphql.GraphQLField, list[TaggedPath]]] = []

        for type_name, type_def in schema.type_map.items():
            kind = type_kind(type_def)

            # Input objects: check @nonNull placement
            if kind is TypeKind.INPUT_OBJECT:
                for field in type_def.fields.values():  # type: ignore[attr-defined]
                    self.check_field(field, type_def)  # type: ignore[arg-type]
            # Object types: find fields that use tagged inputs
            elif kind is TypeKind.OBJECT:
                for field_name, field in type_def.fields.items():  # type: ignore[attr-defined]
                    tagged_paths = self.find_tagged_paths(field)
                    if tagged_paths:
                        fields_to_wrap.append((type_name, field_name, field, tagged_paths))

        for type_name, field_name, field, tagged_paths in fields_to_wrap:
            wrap_field_resolvers(field, tagged_paths, self.build_input_error)
            logger.debug('@%s: %s.%s checks %s', self.name, type_name, field_name, ', '.join(map(str, tagged_paths)))

        self._mark_installed(schema)
        return schema

    def check_field(self, field: graphql.GraphQLInputField, type_def: graphql.GraphQLInputObjectType) -> graphql.GraphQLInputField:
        """ Check that @nonNull is not used on a field that is already non-null

        Raises:
            ConfigurationError
        """
        if not has_directive(self.name, field.ast_node):
            return field

        if type_kind(field.type) is TypeKind.NON_NULL:
            field_name = field.ast_node.name.value  # type: ignore[union-attr]
            raise ConfigurationError(
                f'@{self.name} cannot be used on a field that is already non-nullish (! operator): '
                f'field "{field_name}: {field.type}" on input {type_def.name}'
            )

        return field

    def find_tagged_paths(self, field: graphql.GraphQLField) -> list[TaggedPath]:
        """ Find all tagged input fields reachable through the field's arguments """
        return find_tagged_paths(field, self.name)

    def is_installed(self, schema: graphql.GraphQLSchema) -> bool:
        """ Has this directive already been installed into the schema? """
        return bool(schema.extensions and schema.extensions.get(self._marker))

    def _mark_installed(self, schema: graphql.GraphQLSchema):
        # NOTE: `extensions` used to be `None` by default in graphql-core 3.1
        extensions: dict[str, Any] = dict(schema.extensions or {})
        extensions[self._marker] = True
        schema.extensions = extensions

    @property
    def _marker(self) -> str:
        # Key in `schema.extensions`. Every directive name gets its own.
        return f'{__name__}:@{self.name}'


def create_non_null_directive(directive_name: str = DIRECTIVE_NAME, build_input_error: abc.Callable[[str], Exception] = InputValidationError) -> NonNullDirective:
    """ Configure a @nonNull directive

    Args:
        directive_name: Use a different name for the directive
        build_input_error: Make a custom error when a `null` is found. Gets the message: "input.firstName cannot be null"
    """
    return NonNullDirective(name=directive_name, build_input_error=build_input_error)


def install_directive_to_schema(schema: graphql.GraphQLSchema) -> graphql.GraphQLSchema:
    """ Low-level: shortcut: install the default @nonNull directive into a GraphQL schema """
    return create_non_null_directive().transform(schema)
