from __future__ import annotations

from collections import abc
from functools import update_wrapper
from typing import Any

import graphql

from .paths import TaggedPath


class NonNullResolver:
    """ Resolver wrapper: reject explicit `null`s at tagged paths, then call the original resolver

    Has the same signature as any other resolver: `(root, info, **kwargs)`.
    If the original resolver is async, the coroutine is returned as is: the check happens before it's created.
    """

    # The original resolver found on the field
    original_resolver: graphql.GraphQLFieldResolver

    # Paths to check, shortest first
    tagged_paths: tuple[TaggedPath, ...]

    # Makes the error to raise. Gets the message.
    build_input_error: abc.Callable[[str], Exception]

    def __init__(self, original_resolver: graphql.GraphQLFieldResolver, tagged_paths: abc.Iterable[TaggedPath], build_input_error: abc.Callable[[str], Exception]):
        # Make sure it's properly wrapped: any decorators applied to the original function are visible through us.
        # Goes first: it copies the original `__dict__` over, and we don't want it to overwrite our attributes
        update_wrapper(self, original_resolver)  # type: ignore[arg-type]

        self.original_resolver = original_resolver
        self.tagged_paths = tuple(sorted(tagged_paths, key=len))
        self.build_input_error = build_input_error

    def __call__(self, root, info: graphql.GraphQLResolveInfo, /, **kwargs) -> Any:
        self.check_arguments(kwargs)
        return self.original_resolver(root, info, **kwargs)

    def check_arguments(self, kwargs: abc.Mapping[str, Any]):
        """ Fail if any tagged path has an explicit `null` in `kwargs` """
        for path in self.tagged_paths:
            if path.is_null_in(kwargs):
                raise self.build_input_error(f'{path} cannot be null')

    def __repr__(self):
        return f'{type(self).__name__}({self.original_resolver!r})'


def wrap_field_resolvers(field: graphql.GraphQLField, tagged_paths: abc.Sequence[TaggedPath], build_input_error: abc.Callable[[str], Exception]):
    """ Replace the field's resolver with a NonNullResolver

    NOTE: for subscriptions, it also wraps the subscriber, so that a `null` fails when the subscription starts.
    """
    # `field.resolve` is `None` when a default resolver is assumed.
    # Bind your resolvers before the directive is installed: they won't be wrapped otherwise.
    field.resolve = NonNullResolver(field.resolve or graphql.default_field_resolver, tagged_paths, build_input_error)

    if field.subscribe is not None:
        field.subscribe = NonNullResolver(field.subscribe, tagged_paths, build_input_error)
