# -*- coding: utf-8 -*-

import setuptools

install_requires = [
  "Flask>=2.3",
  "Flask-SQLAlchemy>=3.0",
  "SQLAlchemy>=1.4",
  "Flask-WTF>=1.1",
  "WTForms>=3.0",
  "Flask-Babel>=3.0",
  "Flask-Login>=0.6",
  "Flask-Mail",
  "Flask-Migrate",
  "blinker",
  "PyYAML",
  "bleach",
  "pytz",
  "click",
]

tests_require = [
  "pytest",
  "pytest-xdist",
]

dev_requires = tests_require + [
  # For coverage
  "coverage",
  "pytest-cov",
  # Static code analysis
  "flake8",
  "nox",
]


def get_long_description():
  return open("README.rst").read()


setuptools.setup(
  # Metadata
  name='studentquiz',
  version='0.1.0.dev0',
  license='GPL',
  description='StudentQuiz comment area web services, based on Flask and SQLAlchemy',
  long_description=get_long_description(),
  platforms='any',
  classifiers=[
    'Development Status :: 3 - Alpha',
    'Environment :: Web Environment',
    'Intended Audience :: Developers',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Framework :: Flask',
  ],

  # Data
  packages=setuptools.find_packages(include=['studentquiz', 'studentquiz.*']),
  package_data={'studentquiz': ['default_logging.yml']},
  include_package_data=True,
  zip_safe=False,
  python_requires='>=3.9',

  # Requirements & dependencies
  install_requires=install_requires,
  tests_require=tests_require,
  extras_require={
    'tests': tests_require,
    'dev': dev_requires,
  },
)
