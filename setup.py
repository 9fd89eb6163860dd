from setuptools import setup, find_packages

setup(
    name="cookiemilk",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["run"],
    install_requires=[
        "numpy",
        "fastapi",
        "uvicorn",  # ASGI server for the HTTP interface
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",  # required by fastapi.testclient
        ],
    },
)
