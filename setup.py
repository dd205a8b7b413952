import codecs
from setuptools import setup, find_packages

with open('statekeeper/version.py') as f:
    exec(f.read())

with codecs.open('README.md', 'r', 'utf-8') as f:
    import re
    # cut the badges from the description, PyPi only needs the usage part
    regex = r"([\s\S]*)## Quickstart"
    readme = f.read()

    long_description = re.sub(regex, "## Quickstart", readme, count=1)
    assert long_description[:13] == '## Quickstart'  # Description should start with a headline (## Quickstart)

tests_require = ['pytest', 'pytest-xdist', 'pycodestyle']
extras_require = {'test': tests_require, 'mypy': ['mypy']}

setup(
    name="statekeeper",
    version=__version__,
    description="A lightweight finite state machine with linear undo/redo history over its state changes.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=['tests', 'test_*']),
    package_data={'statekeeper': ['py.typed', '*.pyi', 'extensions/*.pyi']},
    include_package_data=True,
    install_requires=[],
    extras_require=extras_require,
    python_requires='>=3.8',
    license='MIT',
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
