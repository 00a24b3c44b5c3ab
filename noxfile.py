import nox.sessions

# Nox
nox.options.reuse_existing_virtualenvs = True
nox.options.sessions = [
    'tests',
    'tests_ariadne',
    'tests_graphql',
]

# Versions
PYTHON_VERSIONS = ['3.9', '3.10', '3.11']
ARIADNE_VERSIONS = [
    # Selective
    '0.17.1', '0.18.1', '0.19.1', '0.20.1',
]
GRAPHQL_CORE_VERSIONS = [
    '3.2.0', '3.2.3',
]


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.sessions.Session, *, overrides: dict[str, str] = {}):
    """ Run all tests """
    session.install('.[test]')

    if overrides:
        session.install(*(f'{name}=={version}' for name, version in overrides.items()))

    # Test
    args = []
    if not overrides:
        args.append('--cov=graphql_nonnull')

    session.run('pytest', 'tests/', *args)


@nox.session(python=PYTHON_VERSIONS[-1])
@nox.parametrize('ariadne', ARIADNE_VERSIONS)
def tests_ariadne(session: nox.sessions.Session, ariadne):
    """ Test against a specific Ariadne version """
    tests(session, overrides={'ariadne': ariadne})


@nox.session(python=PYTHON_VERSIONS[-1])
@nox.parametrize('graphql_core', GRAPHQL_CORE_VERSIONS)
def tests_graphql(session: nox.sessions.Session, graphql_core):
    """ Test against a specific GraphQL version """
    tests(session, overrides={'graphql-core': graphql_core})
