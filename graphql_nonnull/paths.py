""" Tagged paths: routes from a field's arguments to the input fields marked with the directive

Example:

    input AddressInput {
        zipCode: String @nonNull
    }

    input UpdateUserInput {
        firstName: String @nonNull
        address: AddressInput
    }

    type Mutation {
        updateUser(input: UpdateUserInput!): User
    }

Field `Mutation.updateUser` has two tagged paths:

    input.firstName
    input.address.zipCode
"""
from __future__ import annotations

from collections import abc
from dataclasses import dataclass
from typing import Any, Union

import graphql

from .ast import has_directive
from .errors import ConfigurationError
from .types import TypeKind, type_kind, unwrap_non_null


# Definitions a path goes through: the argument first, then input fields
InputDefinition = Union[graphql.GraphQLArgument, graphql.GraphQLInputField]


@dataclass(frozen=True)
class TaggedPath:
    """ A route from a field argument, through nested input objects, to a tagged input field """
    # GraphQL names: ('input', 'address', 'zipCode')
    names: tuple[str, ...]

    # Definitions of the argument and every input field along the way
    definitions: tuple[InputDefinition, ...]

    def __len__(self):
        return len(self.names)

    def __str__(self):
        return '.'.join(self.names)

    def extend(self, name: str, definition: InputDefinition) -> TaggedPath:
        """ Get a longer path: one more field name at the end """
        return TaggedPath((*self.names, name), (*self.definitions, definition))

    @property
    def keys(self) -> tuple[str, ...]:
        """ Python names to look the values up with

        These are different from GraphQL names when `out_name` is used (e.g. Ariadne's `convert_names_case`).
        Computed every time: names can be converted after the directive has been installed.
        """
        return tuple(
            definition.out_name or name
            for name, definition in zip(self.names, self.definitions)
        )

    def is_null_in(self, kwargs: abc.Mapping[str, Any]) -> bool:
        """ Is there an explicit `null` somewhere along this path?

        A missing value is not a `null`: if an optional parent object is not provided at all,
        its @nonNull fields are not provided either.
        But if the parent is provided as `null`, it counts as `null`.
        """
        value: Any = kwargs
        for key in self.keys:
            value = _get_value(value, key)
            if value is None:
                return True
            elif value is graphql.Undefined:
                return False
        return False


def _get_value(value: Any, key: str) -> Any:
    # Input objects are dicts, unless somebody has replaced `out_type` on the type
    if isinstance(value, abc.Mapping):
        return value.get(key, graphql.Undefined)
    else:
        return getattr(value, key, graphql.Undefined)


def find_tagged_paths(field: graphql.GraphQLField, directive_name: str) -> list[TaggedPath]:
    """ Find all input fields tagged with a directive that are reachable through the arguments of `field`

    Returns:
        Paths in discovery order. Empty if there are none.
    Raises:
        ConfigurationError: tagged fields are reachable through a recursive input type
    """
    found: list[TaggedPath] = []

    for arg_name, arg in field.args.items():
        # Unpack the "!" operator
        # NB: we're not unpacking lists because @nonNull does not make sense inside the list, use "!" for that.
        # So @nonNull only tags the list itself
        arg_type = unwrap_non_null(arg.type)

        if type_kind(arg_type) is TypeKind.INPUT_OBJECT:
            _walk_input_object(arg_type, TaggedPath((arg_name,), (arg,)), directive_name, found, chain=())  # type: ignore[arg-type]

    return found


def _walk_input_object(type_def: graphql.GraphQLInputObjectType, prefix: TaggedPath, directive_name: str, found: list[TaggedPath], chain: tuple[str, ...]):
    # Recursive input type: A -> B -> A
    if type_def.name in chain:
        _check_recursive_input_object(type_def, chain, directive_name)
        return

    chain = (*chain, type_def.name)

    for field_name, field in type_def.fields.items():
        path = prefix.extend(field_name, field)

        # Nested input objects
        field_type = unwrap_non_null(field.type)
        if type_kind(field_type) is TypeKind.INPUT_OBJECT:
            _walk_input_object(field_type, path, directive_name, found, chain)  # type: ignore[arg-type]

        # This is the tagged input field!
        if has_directive(directive_name, field.ast_node):
            found.append(path)


def _check_recursive_input_object(type_def: graphql.GraphQLInputObjectType, chain: tuple[str, ...], directive_name: str):
    """ Fail if a recursive input type leads to any tagged fields: there would be infinitely many paths """
    if not _reaches_tagged_field(type_def, directive_name, seen=set()):
        return

    cycle = ' -> '.join((*chain[chain.index(type_def.name):], type_def.name))
    raise ConfigurationError(
        f'@{directive_name} cannot be enforced through recursive input types: {cycle}'
    )


def _reaches_tagged_field(type_def: graphql.GraphQLInputObjectType, directive_name: str, seen: set[str]) -> bool:
    seen.add(type_def.name)

    for field in type_def.fields.values():
        if has_directive(directive_name, field.ast_node):
            return True

        field_type = unwrap_non_null(field.type)
        if type_kind(field_type) is TypeKind.INPUT_OBJECT and field_type.name not in seen:  # type: ignore[attr-defined]
            if _reaches_tagged_field(field_type, directive_name, seen):  # type: ignore[arg-type]
                return True

    return False
