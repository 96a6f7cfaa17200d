# setup.py
from setuptools import setup, find_packages

setup(
    name="wdir",
    version="1.0.0",
    description="Directory listing tool that mimics the Windows 'dir' command",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",  # glob(include_hidden=...)
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'wdir=wdir.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Environment :: Console",
        "Operating System :: OS Independent",
    ],
)
