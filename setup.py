# setup.py
from setuptools import setup, find_packages

install_requires = [
    # --- UI ---
    "flet>=0.70.0",

    # --- NETWORK ---
    "httpx>=0.27.0",

    # --- CONFIGURATION ---
    "pydantic>=2.0.0",
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",
]

extras_require = {
    # --- TESTS---
    "test": [
        "pytest-asyncio==1.3.0",
        "pytest",
    ],
}

setup(
    name="kece-market",
    version="1.0.0",
    description="Kece Market product screen",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "kece-market=kece.app.main:run",
        ],
    },
    python_requires=">=3.11",
)
