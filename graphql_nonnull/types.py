""" Classify GraphQL types

graphql-core has a bunch of `is_*_type()` predicates. This module puts them together into one closed enum,
so that the schema traversal can tell type kinds apart with a plain `if kind is TypeKind.X`.
"""
import enum

import graphql


class TypeKind(enum.Enum):
    """ Kinds of GraphQL type nodes """
    # Wrappers
    NON_NULL = 'NON_NULL'
    LIST = 'LIST'

    # Named types
    INPUT_OBJECT = 'INPUT_OBJECT'
    OBJECT = 'OBJECT'
    INTERFACE = 'INTERFACE'
    UNION = 'UNION'
    SCALAR = 'SCALAR'
    ENUM = 'ENUM'


def type_kind(type_: graphql.GraphQLType) -> TypeKind:
    """ Get the kind of a GraphQL type """
    # Wrapping types go first
    if graphql.is_non_null_type(type_):
        return TypeKind.NON_NULL
    elif graphql.is_list_type(type_):
        return TypeKind.LIST
    # Named types
    elif graphql.is_input_object_type(type_):
        return TypeKind.INPUT_OBJECT
    elif graphql.is_object_type(type_):
        return TypeKind.OBJECT
    elif graphql.is_interface_type(type_):
        return TypeKind.INTERFACE
    elif graphql.is_union_type(type_):
        return TypeKind.UNION
    elif graphql.is_scalar_type(type_):
        return TypeKind.SCALAR
    elif graphql.is_enum_type(type_):
        return TypeKind.ENUM
    else:
        raise TypeError(f'Unknown GraphQL type: {type_!r}')


def unwrap_non_null(type_: graphql.GraphQLType) -> graphql.GraphQLType:
    """ Unpack the "!" operator. Only once.

    Lists are not unpacked: a `[String!]!` becomes a `[String!]`
    """
    if type_kind(type_) is TypeKind.NON_NULL:
        return type_.of_type  # type: ignore[attr-defined]
    else:
        return type_
