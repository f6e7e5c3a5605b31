# setup.py
from setuptools import setup, find_packages

setup(
    name="sessionlog",
    version="1.0.0",
    description="Timestamped, level-counted session logging to a single file with colored console echo",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "colorama>=0.4.6",  # ANSI colour codes + Windows console support
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'sessionlog-demo=sessionlog.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
