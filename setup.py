# -*- coding: utf-8 -*-
from setuptools import setup

packages = \
['graphql_nonnull',
 'graphql_nonnull.ariadne']

package_data = \
{'': ['*']}

install_requires = \
['graphql-core>=3.2.0,<3.4.0']

extras_require = \
{'ariadne': ['ariadne>=0.17.0'],
 'test': ['pytest>=7.0',
          'pytest-asyncio>=0.18',
          'pytest-cov',
          'ariadne>=0.17.0']}

setup_kwargs = {
    'name': 'graphql-nonnull',
    'version': '1.0.0',
    'description': 'GraphQL @nonNull directive: optional input fields that cannot be null',
    'long_description': None,
    'author': None,
    'author_email': None,
    'maintainer': None,
    'maintainer_email': None,
    'url': None,
    'packages': packages,
    'package_data': package_data,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'python_requires': '>=3.9,<4.0',
}


setup(**setup_kwargs)
