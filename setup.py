from setuptools import setup, find_packages

VERSION = '0.1.0'
DESCRIPTION = 'EIP-55 checksum address encoder'
LONG_DESCRIPTION = 'EIP-55 mixed-case checksum encoding of hex addresses with typed errors, bytes overloads and an optional cache'

requirements = [
    'eth-hash[pycryptodome]',
    'eth-typing',
]

test_requirements = [
    'eth-utils',
    'pytest',
]

# Setting up
setup(
    name="Eip55Checksum",
    version=VERSION,
    author="",
    author_email="",
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    packages=find_packages(),
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    keywords=['python', 'Eip55Checksum', 'ethereum', 'checksum'],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: Microsoft :: Windows",
    ],
)
