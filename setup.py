from setuptools import setup

setup(
    name='parsezone',
    version='0.0',
    description="Zone file resource record line parser for twisted.names",
    license='MIT',
    author='Shiyao Ma',
    author_email='i@introo.me',
    packages=['parsezone', 'parsezone.zone', 'parsezone.test'],
    install_requires=[
        'twisted >= 20.3.0',
        'parsley >= 1.3',
        'pyparsing >= 3.0.0',
    ],
    zip_safe=False,
)
