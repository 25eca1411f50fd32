from setuptools import setup, find_packages

long_description = '''
Runtime type assertions for function arguments: check a value against one or
several expected types and raise an error with a descriptive message.
'''

setup(
    name="typethrow",
    version="0.1",
    description="Runtime type assertions with descriptive error messages",
    long_description=long_description,
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords="types assertions contract validation development",
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.7',
    extras_require={
        'test': ['pytest'],
    },
)
