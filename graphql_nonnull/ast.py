from typing import Union, Any

import graphql


def has_directive(directive_name: str, node: Union[graphql.InputValueDefinitionNode, graphql.FieldDefinitionNode, Any]) -> bool:
    """ Check that a field has a specific directive on it

    Example:
        UserInput = schema.get_type('UserInput')
        assert has_directive(
            'nonNull',
            UserInput.fields['firstName'].ast_node
        )
    """
    if not node or not node.directives:
        return False

    return any(
        directive.name.value == directive_name
        for directive in node.directives
    )
