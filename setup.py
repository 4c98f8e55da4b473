from setuptools import setup, find_packages

setup(
    name="email-dispatch",
    version="0.1.0",
    description="Best-effort outbound email dispatch via EmailJS with HTML rendering and a simulation fallback",
    author="",
    author_email="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "Jinja2>=3.0.0",
        "MarkupSafe>=2.0.0",
        "python-dotenv>=0.19.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "requests>=2.28.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
)
