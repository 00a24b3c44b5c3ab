import pytest
import graphql
import ariadne

from graphql_nonnull import ConfigurationError, InputValidationError, NonNullResolver, create_non_null_directive
from graphql_nonnull.ariadne import DIRECTIVE_SDL, directives_map, make_directive_visitor
from tests.lib import graphql_query_sync, error_messages, original_error


def test_ariadne_directive_nonnull():
    """ Test @nonNull through Ariadne's make_executable_schema() """
    def main():
        # language=graphql
        updateUser = 'mutation ($input: UpdateUserInput!) { updateUser(input: $input) { firstName homeAddress { zipCode } } }'

        # === Test: wrapped, other resolvers untouched
        assert isinstance(schema.get_type('Mutation').fields['updateUser'].resolve, NonNullResolver)
        assert schema.get_type('Query').fields['hello'].resolve is resolve_hello

        # === Test: ok
        res = graphql_query_sync(schema, updateUser, input={'firstName': 'John', 'homeAddress': {'zipCode': '123'}})
        assert res.data == {'updateUser': {'firstName': 'John', 'homeAddress': {'zipCode': '123'}}}

        # Python names are used: `convert_names_case`
        assert calls == [{'first_name': 'John', 'home_address': {'zip_code': '123'}}]

        # === Test: skipped
        res = graphql_query_sync(schema, updateUser, input={'homeAddress': {}})
        assert res.errors is None

        # === Test: null. GraphQL names are reported.
        calls.clear()
        res = graphql_query_sync(schema, updateUser, input={'firstName': None})
        assert error_messages(res) == ['input.firstName cannot be null']
        assert isinstance(original_error(res), InputValidationError)

        res = graphql_query_sync(schema, updateUser, input={'homeAddress': {'zipCode': None}})
        assert error_messages(res) == ['input.homeAddress.zipCode cannot be null']
        assert calls == []

        # === Test: through Ariadne
        success, response = ariadne.graphql_sync(schema, {
            'query': updateUser,
            'variables': {'input': {'firstName': None}},
        })
        assert response['data'] == {'updateUser': None}
        assert response['errors'][0]['message'] == 'input.firstName cannot be null'
        assert response['errors'][0]['path'] == ['updateUser']

    # language=graphql
    GQL_SCHEMA = '''
    input AddressInput {
        zipCode: String @nonNull
    }

    input UpdateUserInput {
        firstName: String @nonNull
        homeAddress: AddressInput
    }

    type Query {
        hello: String
    }

    type Mutation {
        updateUser(input: UpdateUserInput!): User
    }

    type User {
        firstName: String
        homeAddress: Address
    }

    type Address {
        zipCode: String
    }
    '''

    calls = []

    Query = ariadne.QueryType()
    Mutation = ariadne.MutationType()

    @Query.field('hello')
    def resolve_hello(_, info: graphql.GraphQLResolveInfo):
        return 'hi'

    @Mutation.field('updateUser')
    def resolve_update_user(_, info: graphql.GraphQLResolveInfo, input: dict):
        calls.append(input)
        return input

    schema = ariadne.make_executable_schema(
        [GQL_SCHEMA, DIRECTIVE_SDL],
        Query, Mutation,
        directives=directives_map,
        convert_names_case=True,
    )

    main()


def test_ariadne_directive_custom():
    """ Test a custom @notNull directive with Ariadne """
    class E_NULL_ARGUMENT(Exception):
        pass

    notnull = create_non_null_directive('notNull', build_input_error=E_NULL_ARGUMENT)

    # language=graphql
    GQL_SCHEMA = '''
    input UserFilter {
        login: String @notNull
    }

    type Query {
        users(filter: UserFilter): [String]
    }
    '''

    Query = ariadne.QueryType()

    @Query.field('users')
    def resolve_users(_, info: graphql.GraphQLResolveInfo, filter: dict = None):
        return ['john']

    schema = ariadne.make_executable_schema(
        [GQL_SCHEMA, notnull.declaration],
        Query,
        directives={notnull.name: make_directive_visitor(notnull)},
    )

    res = graphql_query_sync(schema, 'query { users(filter: { login: null }) }')
    assert error_messages(res) == ['filter.login cannot be null']
    assert isinstance(original_error(res), E_NULL_ARGUMENT)

    res = graphql_query_sync(schema, 'query { users }')
    assert res.data == {'users': ['john']}


def test_ariadne_directive_misplaced():
    """ Test: @nonNull on a non-null field fails the schema """
    # language=graphql
    GQL_SCHEMA = '''
    input UserInput {
        login: String! @nonNull
    }

    type Query {
        createUser(user: UserInput): String
    }
    '''

    with pytest.raises(ConfigurationError) as e:
        ariadne.make_executable_schema([GQL_SCHEMA, DIRECTIVE_SDL], directives=directives_map)
    assert 'field "login: String!" on input UserInput' in str(e.value)
