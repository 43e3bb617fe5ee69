from setuptools import setup


setup(
    name='gramma',
    license='Apache 2.0',
    description='Representation and validation of context-free grammars',
    version='0.0.dev1',
    packages=['gramma', 'gramma.cfg'],
    install_requires=['tabulate'],
)
